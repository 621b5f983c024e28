"""Parsers turning raw ECS/EC2 responses into models."""

from ecsnav.controllers.ecs.parsers.instance_parser import InstanceParser

__all__ = ["InstanceParser"]
