"""Application layer – mail value objects, ports and checks."""
