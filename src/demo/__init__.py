"""Demo entrypoint: replays a YAML scenario against an in-memory social graph."""
