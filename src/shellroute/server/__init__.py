"""Per-request pipeline: dispatcher, ASGI adapter, and server launcher."""
