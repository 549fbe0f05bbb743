from .router import router
from .service import LuaLocalizationParser

__all__ = ["router", "LuaLocalizationParser"]
