"""PetLog backend: models, calendar core, SQLite services and HTTP API."""
