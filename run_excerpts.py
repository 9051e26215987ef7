# run_excerpts.py
"""
Resolve excerpts for a file of content nodes and print them as JSON lines.

    python run_excerpts.py --nodes nodes.yaml [--config configs/excerpts.yaml] [--excerpt snippet]

The nodes file (YAML or JSON) holds a list of mappings.  Each mapping needs a
``type`` key (the node type); every other key is a field of the node.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from loguru import logger

# Make the repo root importable (same as the other entry scripts)
repo_root = Path(__file__).resolve().parent
if str(repo_root) not in sys.path:
    sys.path.append(str(repo_root))

from core.logging import configure_logging
from services.excerpts import ExcerptResolver, NodeAttributeFieldResolver, SchemaFieldBinder
from services.excerpts.config_loader import load_plugin_configuration


def _load_nodes(path: Path) -> List[Dict[str, Any]]:
    with path.open("r", encoding="utf-8") as fh:
        nodes = yaml.safe_load(fh) or []
    if not isinstance(nodes, list):
        raise ValueError(f"{path} must contain a list of nodes")
    return nodes


async def run(config_path: Optional[Path], nodes_path: Path, only_excerpt: Optional[str]) -> int:
    configuration = load_plugin_configuration(config_path)
    resolver = ExcerptResolver(configuration, NodeAttributeFieldResolver())
    binder = SchemaFieldBinder(resolver)

    produced = 0
    for index, node in enumerate(_load_nodes(nodes_path)):
        node_type = node.get("type")
        if not node_type:
            logger.warning(f"Node #{index} has no 'type' – skipped")
            continue

        for name, field in binder.fields_for(node_type).items():
            if only_excerpt and name != only_excerpt:
                continue
            value = await field.resolve(node)
            produced += value is not None
            print(json.dumps({"node": index, "type": node_type, "excerpt": name, "value": value}, ensure_ascii=False))

    logger.info(f"Produced {produced} excerpt value(s)")
    return produced


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Resolve excerpts for content nodes")
    parser.add_argument("--nodes", type=Path, required=True, help="YAML/JSON list of nodes")
    parser.add_argument("--config", type=Path, default=None, help="excerpt plugin configuration (YAML)")
    parser.add_argument("--excerpt", default=None, help="only resolve this excerpt")
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    asyncio.run(run(args.config, args.nodes, args.excerpt))


if __name__ == "__main__":
    main()
