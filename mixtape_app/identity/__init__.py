"""Public façade for the mixtape_app.identity package.

The Firebase-backed verifier lives in mixtape_app.identity.firebase and is
imported on demand by the API wiring.
"""

from .verifier import IdentityVerifier, extract_bearer_token

__all__ = ["IdentityVerifier", "extract_bearer_token"]
