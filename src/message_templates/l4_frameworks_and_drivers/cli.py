"""CLI entry point for message-templates."""

from __future__ import annotations

import sys

import click

from message_templates import __version__
from message_templates.l1_entities.errors import TemplateValidationError
from message_templates.l1_entities.template import TEMPLATE_CATEGORIES

CATEGORY_IDS = [c.id for c in TEMPLATE_CATEGORIES]


def _parse_bindings(pairs: tuple[str, ...]) -> dict[str, str]:
    """Turn ``id=value`` pairs into a binding map; the first ``=`` splits."""
    bindings: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition('=')
        if not sep or not key.strip():
            raise click.BadParameter(f"expected id=value, got '{pair}'", param_hint='--set')
        bindings[key.strip()] = value
    return bindings


def _fail(message: str) -> None:
    click.echo(f'Error: {message}', err=True)
    sys.exit(1)


@click.group()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True),
    help='Path to YAML config file.',
)
@click.option('--debug', is_flag=True, default=False, help='Write a debug log to the user log directory.')
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, config_path, debug):
    """message-templates -- validate and preview outbound message templates."""
    from message_templates.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from message_templates.l4_frameworks_and_drivers.config import (  # noqa: PLC0415 -- deferred: not needed for --help
        build_app_config,
    )
    from message_templates.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: not needed for --help
        DependencyContainer,
    )

    try:
        raw = YamlConfigLoader().load_raw(config_path)
        config = build_app_config(raw)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))

    if debug:
        from message_templates.l3_interface_adapters.gateways.paths import LOG_DIR  # noqa: PLC0415
        from message_templates.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415
            setup_file_logging,
        )

        setup_file_logging(LOG_DIR)

    ctx.obj = DependencyContainer(config)


def _resolve(container, template_ref: str):
    try:
        return container.repository.resolve(template_ref)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))


@cli.command('list')
@click.option(
    '--category',
    default=None,
    type=click.Choice([*CATEGORY_IDS, 'all']),
    help="Only show this category ('all' for every category).",
)
@click.option('--search', 'query', default='', help='Match name, body or tags (case-insensitive).')
@click.pass_obj
def list_templates(container, category, query):
    """List templates in the library."""
    try:
        templates = container.library.search(query, category)
    except ValueError as e:
        _fail(str(e))
    if not templates:
        click.echo('No templates found.')
        return
    for tmpl in templates:
        click.echo(
            f'{tmpl.id:<24} {tmpl.status.value:<9} {tmpl.category:<12} {tmpl.usage_count:>5} uses  {tmpl.name}'
        )


@cli.command()
@click.argument('template_ref')
@click.pass_obj
def validate(container, template_ref):
    """Validate a template's placeholders (exit 1 when problems are found)."""
    template = _resolve(container, template_ref)
    report = container.validator.execute(template)
    if report.is_valid:
        click.echo(f'{template.id}: OK')
        return
    for finding in report.findings:
        click.echo(f'{template.id}: {finding}')
    sys.exit(1)


@cli.command()
@click.argument('template_ref')
@click.option('--set', 'pairs', multiple=True, metavar='ID=VALUE', help='Override a placeholder value.')
@click.option('--escape-html', is_flag=True, default=False, help='HTML-escape text before applying markup.')
@click.pass_obj
def preview(container, template_ref, pairs, escape_html):
    """Render a template preview with sample values."""
    from message_templates.l2_use_cases.render_preview_use_case import (  # noqa: PLC0415
        RenderPreviewUseCase,
    )

    template = _resolve(container, template_ref)
    renderer = container.renderer
    if escape_html:
        renderer = RenderPreviewUseCase(container.samples, escape_html=True)
    click.echo(renderer.execute(template, _parse_bindings(pairs)))


@cli.command()
@click.argument('template_ref')
@click.pass_obj
def variables(container, template_ref):
    """List every placeholder a template may use."""
    template = _resolve(container, template_ref)
    registry = container.validator.registry_for(template)
    used = set(container.validator.execute(template).used)
    for decl in registry.entries():
        flags = ('required ' if decl.required else '') + ('used' if decl.id in used else '')
        click.echo(f'{decl.marker:<28} {decl.kind.value:<14} {flags.strip():<14} {decl.display_name}')


@cli.command()
@click.argument('name')
@click.option('--category', default=None, type=click.Choice(CATEGORY_IDS), help='Template category.')
@click.option('--language', default=None, help='Template language code.')
@click.pass_obj
def new(container, name, category, language):
    """Create an empty draft template."""
    library_cfg = container.config.library
    template = container.library.create(
        name,
        category=category or library_cfg.default_category,
        language=language or library_cfg.default_language,
    )
    click.echo(f'Created {template.id} in {container.repository.user_dir}')


@cli.command()
@click.argument('template_ref')
@click.pass_obj
def activate(container, template_ref):
    """Promote a template to active (refused when it has problems)."""
    template = _resolve(container, template_ref)
    try:
        container.library.activate(template)
    except TemplateValidationError as e:
        for finding in e.findings:
            click.echo(f'{template.id}: {finding}', err=True)
        _fail(f"'{template.id}' was not activated")
    click.echo(f'{template.id}: active')


@cli.command()
@click.argument('template_ref')
@click.pass_obj
def archive(container, template_ref):
    """Archive a template."""
    template = _resolve(container, template_ref)
    container.library.archive(template)
    click.echo(f'{template.id}: archived')


@cli.command()
@click.argument('template_ref')
@click.pass_obj
def duplicate(container, template_ref):
    """Copy a template into a new draft."""
    template = _resolve(container, template_ref)
    copy = container.library.duplicate(template)
    click.echo(f'Created {copy.id} ({copy.name})')


@cli.command()
@click.argument('template_id')
@click.confirmation_option(prompt='Are you sure you want to delete this template?')
@click.pass_obj
def delete(container, template_id):
    """Delete a user template."""
    try:
        container.library.delete(template_id)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))
    click.echo(f'Deleted {template_id}')
