"""Bounded content loaders."""

from agreedisclaimer.loaders.content_loader import ContentLoader

__all__ = ["ContentLoader"]
