"""Command line interface for building a datapack archive locally."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# Bootstrap sys.path when executed directly
project_root = Path(__file__).resolve().parents[4]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.shared.utils.config_validator import ConfigurationError
from src.shared.utils.env import load_env
from src.shared.utils.logging import setup_logging
from src.functions.datapack_builder.core.config import AssemblerSettings
from src.functions.datapack_builder.core.contracts import ValidationError
from src.functions.datapack_builder.core.effects import list_effects
from src.functions.datapack_builder.core.generation import PackAssembler, command_preview
from src.functions.datapack_builder.core.processing import normalize_pack_config

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--pack-name", help="Display name of the datapack")
    parser.add_argument("--namespace", help="Namespace (defaults to the slugified pack name)")
    parser.add_argument("--item", help="Item id that grants the effect while held")
    parser.add_argument("--effect", help="Effect id to apply")
    parser.add_argument("--duration", help="Effect duration in seconds (2-60)")
    parser.add_argument("--amplifier", help="Effect amplifier (0-4)")
    parser.add_argument("--message", help="Chat message broadcast when the pack loads")
    parser.add_argument(
        "--output",
        default=".",
        help="Directory to write the archive to (default: current directory)",
    )
    parser.add_argument("--preview", action="store_true", help="Print generated files instead of writing a zip")
    parser.add_argument("--list-effects", action="store_true", help="List the effect catalog and exit")
    return parser.parse_args(argv)


def build_payload(args: argparse.Namespace) -> Dict[str, Any]:
    payload = {
        "packName": args.pack_name,
        "namespace": args.namespace,
        "itemId": args.item,
        "effectId": args.effect,
        "duration": args.duration,
        "amplifier": args.amplifier,
        "message": args.message,
    }
    return {key: value for key, value in payload.items() if value is not None}


def main(argv: Optional[List[str]] = None) -> int:
    load_env()
    setup_logging()

    args = parse_args(argv)

    if args.list_effects:
        print(json.dumps([option.to_dict() for option in list_effects()], indent=2, ensure_ascii=False))
        return 0

    try:
        config = normalize_pack_config(build_payload(args))
    except ValidationError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    try:
        settings = AssemblerSettings.from_env()
    except ConfigurationError as exc:
        logger.error("Invalid environment settings: %s", exc)
        return 3

    assembler = PackAssembler(settings)
    logger.info("Tick command: %s", command_preview(config))

    if args.preview:
        print(json.dumps(assembler.build_pack(config).to_dict(), indent=2, ensure_ascii=False))
        return 0

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / config.archive_name
    output_path.write_bytes(assembler.assemble(config))
    print(f"Wrote {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
