"""ecsnav - interactive terminal browser for AWS ECS."""

__version__ = "0.3.0"

__all__ = ["__version__"]
