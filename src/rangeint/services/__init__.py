"""Service layer — operations exposed to the CLI, returning ServiceResult."""
