"""Books bounded context: entities, ports and errors."""
