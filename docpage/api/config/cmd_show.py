"""Config show command."""

from collections.abc import Iterator

from .._output_schemas.config import ConfigShowOutput
from ..StageResult import StageResult
from .DocpageConfig import DocpageConfig
from .get_config_path import get_config_path


def cmd_show(section: str = "") -> StageResult:
    """Show the effective configuration, or one section of it.

    Args:
        section: Top-level key (e.g. "source", "commands"); empty for everything
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = get_config_path()
        yield (0.3, "Loading configuration...")
        try:
            config = DocpageConfig.load(config_path)
        except ValueError as e:
            result_obj.result = str(e)
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                warnings=[],
                section=section,
                content={},
                config_path=str(config_path),
                config_exists=config_path.exists(),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.7, "Selecting section...")
        data = config.to_dict()
        warnings = [] if config_path.exists() else [f"No config file at {config_path}; using defaults"]
        if section and section not in data:
            message = f"Unknown section {section!r} (available: {', '.join(data)})"
            result_obj.result = message
            result_obj.output = ConfigShowOutput(
                errors=[message],
                warnings=warnings,
                section=section,
                content={},
                config_path=str(config_path),
                config_exists=config_path.exists(),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        content = data[section] if section else data
        if not isinstance(content, dict):
            content = {section: content}

        yield (1.0, "Complete")
        result_obj.result = f"Configuration section {section!r}" if section else "Configuration"
        result_obj.output = ConfigShowOutput(
            errors=[],
            warnings=warnings,
            section=section,
            content=content,
            config_path=str(config_path),
            config_exists=config_path.exists(),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Showing configuration...",
        progress_callback=do_work,
    )
