"""boto3-backed resource provider."""

from ecsnav.controllers.ecs.provider import EcsResourceProvider

__all__ = ["EcsResourceProvider"]
