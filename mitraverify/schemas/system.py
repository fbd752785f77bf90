from pydantic import BaseModel, Field
from typing import List


class HealthStatus(BaseModel):
    status: str
    version: str = ""


class ModelInfo(BaseModel):
    text_model: str = ""
    image_model: str = ""
    embedding_model: str = ""


class SystemStats(BaseModel):
    status: str
    supported_languages: List[str] = Field(default_factory=list)
    supported_formats: List[str] = Field(default_factory=list)
    model_info: ModelInfo = Field(default_factory=ModelInfo)
