"""SQLAlchemy plumbing: engine factory and table schema."""
