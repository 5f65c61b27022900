"""CLI entrypoint with select/translate commands."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from lxml import etree
from pydantic import BaseModel, Field

from .accessors import html_attrs, html_name, html_text
from .config import Config, load_config
from .dispatch import html_node, html_nodes
from .document import is_element, read_html
from .errors import NodeselectError
from .nodeset import NodeSet
from .selector import DOCUMENT_PREFIX, ELEMENT_PREFIX, css_to_xpath

logger = logging.getLogger(__name__)

PREFIXES = {"document": DOCUMENT_PREFIX, "element": ELEMENT_PREFIX}


class MatchRecord(BaseModel):
    index: int = Field(..., description="Position of the match in the result.")
    tag: Optional[str] = Field(None, description="Tag name, None for text or attribute results.")
    text: str = ""
    attrs: Dict[str, str] = Field(default_factory=dict)


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nodeselect", description="Select nodes from HTML with CSS or XPath")
    parser.add_argument("--config", default="nodeselect.yaml", help="Path to config yaml")
    parser.add_argument("--log-level", default=None, help="Override logging level")
    sub = parser.add_subparsers(dest="command", required=True)

    select_p = sub.add_parser("select", help="Print nodes matching a selector")
    select_p.add_argument("source", help="HTML file, or - for stdin")
    group = select_p.add_mutually_exclusive_group(required=True)
    group.add_argument("--css")
    group.add_argument("--xpath")
    select_p.add_argument("--first", action="store_true", help="Only the first match")
    select_p.add_argument("--attr", default=None, help="Print this attribute instead of text")
    select_p.add_argument("--format", choices=["text", "html", "json"], default=None)
    select_p.add_argument("--flavor", choices=["html", "xml"], default=None)
    select_p.add_argument("--encoding", default=None)

    translate_p = sub.add_parser("translate", help="Print the XPath for a CSS selector")
    translate_p.add_argument("css")
    translate_p.add_argument("--prefix", choices=sorted(PREFIXES), default="document")
    translate_p.add_argument("--flavor", choices=["html", "xml"], default=None)
    return parser


def _configure_logging(config: Config, level: Optional[str] = None) -> None:
    # env overrides may coerce numeric levels to int
    level = level or config.logging.level
    if isinstance(level, str):
        level = int(level) if level.isdigit() else level.upper()
    logging.basicConfig(level=level, format=config.logging.format)


def _read_source(source: str, encoding: Optional[str] = None):
    if source == "-":
        return read_html(sys.stdin.buffer.read(), encoding=encoding)
    return read_html(Path(source), encoding=encoding)


def _render(node, index: int, fmt: str, attr: Optional[str], strip: bool) -> str:
    if fmt == "json":
        record = MatchRecord(
            index=index,
            tag=html_name(node) if is_element(node) else None,
            text=html_text(node, strip=strip) if is_element(node) else str(node),
            attrs=html_attrs(node) if is_element(node) else {},
        )
        return record.model_dump_json()
    if attr is not None:
        value = node.get(attr) if is_element(node) else None
        return value if value is not None else ""
    if fmt == "html" and is_element(node):
        return etree.tostring(node, encoding="unicode", with_tail=False)
    if is_element(node):
        return html_text(node, strip=strip)
    return str(node).strip() if strip else str(node)


def _run_select(config: Config, args: argparse.Namespace) -> int:
    flavor = args.flavor or config.selector.flavor
    fmt = args.format or config.output.format
    doc = _read_source(args.source, encoding=args.encoding)
    if args.first:
        first = html_node(doc, css=args.css, xpath=args.xpath, flavor=flavor)
        nodes = NodeSet([first]) if first is not None else NodeSet()
    else:
        nodes = html_nodes(doc, css=args.css, xpath=args.xpath, flavor=flavor)
    logger.info("Selected %d node(s) from %s", len(nodes), args.source)
    if not nodes:
        return 1
    lines: List[str] = [_render(node, idx, fmt, args.attr, config.output.strip) for idx, node in enumerate(nodes)]
    separator = "\n" if fmt == "json" else config.output.separator
    print(separator.join(lines))
    return 0


def _run_translate(config: Config, args: argparse.Namespace) -> int:
    flavor = args.flavor or config.selector.flavor
    print(css_to_xpath(args.css, prefix=PREFIXES[args.prefix], flavor=flavor))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)
    config = load_config(args.config)
    _configure_logging(config, args.log_level)
    try:
        if args.command == "select":
            return _run_select(config, args)
        if args.command == "translate":
            return _run_translate(config, args)
    except (NodeselectError, etree.XPathError, etree.ParserError, OSError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
