"""Infrastructure layer - cross-cutting concerns (structured logging)."""
