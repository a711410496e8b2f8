"""Transport adapters (HTTP and WebSocket) over the economy services."""
