# === FILE: seo_gateway/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для управления шлюзом seo_gateway через командную строку.

Команды:
  serve     Запустить HTTP-сервер (aiohttp) с домашней страницей и /contact
  check     Прогнать один запрос через шлюз и показать ответ и SEO-метаданные
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml или встроенные значения)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования

Дополнительно:
  --version, -v       Показать версию seo_gateway

Пример:
  seo-gateway check --user-agent "Googlebot/2.1" --json
"""
import asyncio
import json
import sys
from pathlib import Path

import click

from seo_gateway import __version__
from seo_gateway.classifier import classify
from seo_gateway.config import load_config
from seo_gateway.gateway import Gateway
from seo_gateway.logger import init_logging
from seo_gateway.models import GatewayRequest
from seo_gateway.parser import parse_seo_meta
from seo_gateway.server import run_server

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='seo_gateway, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд seo_gateway CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('serve', context_settings=CONTEXT_SETTINGS)
@click.option('--host', default=None, help='Адрес для прослушивания (override server.host)')
@click.option('--port', type=int, default=None, help='Порт (override server.port)')
@click.pass_context
def serve(ctx, host, port):
    """Запустить HTTP-сервер."""
    cfg = ctx.obj['config']
    run_server(cfg, host=host, port=port)


@cli.command('check', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--user-agent', '-u', 'user_agent',
    default='',
    help='Заголовок User-Agent запроса (по умолчанию пустой, как у браузера без заголовка)'
)
@click.option('--json', 'as_json', is_flag=True, help='Вывести результат в JSON')
@click.pass_context
def check(ctx, user_agent, as_json):
    """Показать, что шлюз ответит на запрос с данным User-Agent."""
    cfg = ctx.obj['config']
    gateway = Gateway(cfg)
    request = GatewayRequest(method='GET', headers={'user-agent': user_agent})
    try:
        response = asyncio.run(gateway.handle(request))
    except Exception as e:
        print_error(f'Ошибка при обработке запроса: {e}')

    result = {
        'requester': classify(user_agent, gateway.identifiers).value,
        'status': response.status,
        'headers': dict(response.headers),
        'body_bytes': len(response.body),
    }
    if response.body:
        result['meta'] = parse_seo_meta(response.body).as_dict()

    if as_json:
        click.echo(json.dumps(result, ensure_ascii=False, indent=2))
        return

    click.echo(f"Requester: {result['requester']}")
    click.echo(f"Status: {result['status']}")
    for name, value in result['headers'].items():
        click.echo(f'{name}: {value}')
    click.echo(f"Body: {result['body_bytes']} bytes")
    for name, value in result.get('meta', {}).items():
        if value:
            click.echo(f'  {name}: {value}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
