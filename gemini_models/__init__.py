from gemini_models.errors import AuthenticationError, ModelListError, TransportError
from gemini_models.lister import ModelLister
from gemini_models.settings import Settings

__all__ = ["AuthenticationError", "ModelListError", "ModelLister", "Settings", "TransportError"]
