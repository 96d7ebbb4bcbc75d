"""Public façade for the mixtape_app.mixtapes package (mixtape use cases)."""

from .service import MixtapeService

__all__ = ["MixtapeService"]
