"""Transport layer: authenticated request construction and response processing.

Modules:
    requester: ``Requester`` protocol and its ``httpx`` implementation

Example:
    ```python
    import httpx

    from pterodactyl_client.transport import HTTPRequester

    requester = HTTPRequester(
        base_url=httpx.URL("https://panel.example.com"),
        api_key="ptla_...",
        http_client=httpx.AsyncClient(timeout=10.0),
    )
    ```
"""

from pterodactyl_client.transport.requester import HTTPRequester, Requester

__all__ = ["HTTPRequester", "Requester"]
