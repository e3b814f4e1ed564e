"""Jina AI forwarding package.

Module split:
    - `config`: environment-driven endpoint prefixes, API key and timeout.
    - `client`: URL construction and the single outbound GET.
"""
