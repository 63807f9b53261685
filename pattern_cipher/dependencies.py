from typing import Annotated

from fastapi import Depends, Request

from pattern_cipher.core.config import Settings
from pattern_cipher.services.engines.engine import SubstitutionCipherEngine


# Settings dependency
def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings

SettingsDep = Annotated[Settings, Depends(get_app_settings)]

# Engine dependency
def get_engine(request: Request) -> SubstitutionCipherEngine:
    """Get the engine built at application startup."""
    return request.app.state.engine

EngineDep = Annotated[SubstitutionCipherEngine, Depends(get_engine)]
