"""webrelay package.

Architectural role:
- `api`: HTTP and terminal adapters (FastAPI app, uvicorn bootstrap, CLI).
- `jina`: forwarding client and configuration for the Jina AI reader/search
  services.
- `errors`: exception taxonomy shared by both layers.
"""

__version__ = "0.1.0"
