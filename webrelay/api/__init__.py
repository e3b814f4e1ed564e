"""webrelay adapter package.

Architectural role:
- Defines the external interaction boundary (HTTP via FastAPI, terminal CLI).
- Performs transport-level validation and response shaping.
- Delegates the outbound call to `webrelay.jina.client`.
"""
