from .vote import Vote  # noqa: F401

# Import ALL models so SQLAlchemy registers them

__all__ = [
    "Vote",
]
