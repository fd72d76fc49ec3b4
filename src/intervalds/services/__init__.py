"""Service layer. Interval operations returning ServiceResult."""
