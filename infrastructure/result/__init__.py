# infrastructure/result/__init__.py
from infrastructure.result.base_loader import RunResultLoadError, RunResultLoaderBase
from infrastructure.result.json_loader import JsonRunResultLoader
from infrastructure.result.loader_registry import RunResultLoaderRegistry
from infrastructure.result.yaml_loader import YamlRunResultLoader

__all__ = [
    "RunResultLoadError",
    "RunResultLoaderBase",
    "RunResultLoaderRegistry",
    "YamlRunResultLoader",
    "JsonRunResultLoader",
]
