"""Service layer — runs idiom demonstrations and wraps outcomes in ServiceResult."""
