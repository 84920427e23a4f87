"""Navigation — host protocol, adapter, and an in-process event host."""
