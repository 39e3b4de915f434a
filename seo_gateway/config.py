"""
Модуль для загрузки и валидации конфигурации шлюза seo_gateway.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Tuple, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

__all__ = [
    "DEFAULT_CANDIDATE_PATHS",
    "SiteMeta",
    "ContactConfig",
    "ServerConfig",
    "GatewayConfig",
    "load_config",
    "ValidationError",
]

DEFAULT_CANDIDATE_PATHS: Tuple[Path, ...] = (
    Path("/opt/buildhome/repo/web/dist/index-seo.html"),
    Path("..") / "dist" / "index-seo.html",
    Path("dist") / "index-seo.html",
)


class SiteMeta(BaseModel):
    """Метаданные сайта для встроенного резервного документа."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    title: str = Field("Basketball Scoreboard - Free Online Scoreboard App", min_length=1)
    description: str = Field(
        "Free basketball scoreboard app for real-time game tracking.", min_length=1
    )
    canonical_url: str = Field("https://prettyscoreboard.com/", min_length=1)


class ContactConfig(BaseModel):
    """Настройки обработчика контактной формы и почтового API."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    sender: str = Field("Pretty Scoreboard <noreply@prettyscoreboard.com>", min_length=1)
    recipient: str = Field("support@prettyscoreboard.com", min_length=1)
    api_url: str = Field("https://api.resend.com/emails", description="Endpoint почтового API.")
    api_key_env: str = Field("RESEND_API_KEY", description="Переменная окружения с ключом API.")
    timeout: float = Field(10.0, gt=0, description="Таймаут запроса к почтовому API (секунд).")


class ServerConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    host: str = "0.0.0.0"
    port: int = Field(8080, ge=1, le=65535)


class GatewayConfig(BaseModel):
    """Конфигурация шлюза: где искать пререндер, куда перенаправлять браузеры, кеширование."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    candidate_paths: Tuple[Path, ...] = Field(
        DEFAULT_CANDIDATE_PATHS, description="Пути к index-seo.html в порядке приоритета."
    )
    redirect_location: str = Field("/index.html", min_length=1, description="Точка входа SPA.")
    crawler_max_age: int = Field(3600, ge=0, description="max-age для ответа краулеру.")
    browser_max_age: int = Field(300, ge=0, description="max-age для редиректа браузера.")
    resolve_timeout: float = Field(
        2.0, gt=0, description="Бюджет времени на поиск пререндера (секунд)."
    )
    extra_bot_identifiers: Tuple[str, ...] = Field(
        (), description="Дополнительные подстроки User-Agent краулеров."
    )
    site: SiteMeta = Field(default_factory=SiteMeta)
    contact: ContactConfig = Field(default_factory=ContactConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    @field_validator("extra_bot_identifiers", mode="after")
    def _normalize_identifiers(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        cleaned = (ident.strip().lower() for ident in v)
        return tuple(dict.fromkeys(ident for ident in cleaned if ident))


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> GatewayConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект GatewayConfig.
    Без пути берёт configs/default.yaml, а если его нет, встроенные значения по умолчанию.
    Для явно указанного, но отсутствующего файла бросает FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return GatewayConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return GatewayConfig(**data)
