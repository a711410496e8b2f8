"""WebSocket push channel for economy notifications."""
