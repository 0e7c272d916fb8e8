"""Service layer — operations over a rule catalog, returning ServiceResult."""
