"""Download docs from a GitHub repo and index them for AI coding agents.

Usage::

    docs-to-agent https://github.com/nuxt/nuxt/tree/main/docs
    docs-to-agent https://github.com/vercel/next.js/tree/canary/docs -o CLAUDE.md --name Next.js
    docs-to-agent <url> --json   # structured summary on stdout

Human progress messages go to stderr; ``--json`` puts a summary on stdout.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from docs_to_agent.discovery import collect_doc_files
from docs_to_agent.doc_tree import build_doc_tree, count_files
from docs_to_agent.errors import DocsToAgentError, NoDocsFoundError
from docs_to_agent.github_source import (
    DOCS_BASE_DIR,
    parse_github_url,
    pull_docs,
    repo_key,
)
from docs_to_agent.gitignore import ensure_gitignore_entry
from docs_to_agent.index_format import generate_index
from docs_to_agent.inject import has_block, inject_into_file
from docs_to_agent.io_utils import dump_json, read_text_or_empty, write_text

log = logging.getLogger("docs_to_agent")

DEFAULT_OUTPUT = "AGENTS.md"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docs-to-agent",
        description=(
            "Download docs from a GitHub repo and generate a compact index "
            "for AI coding agents."
        ),
    )
    parser.add_argument(
        "github_url",
        help="GitHub URL with docs path (e.g. https://github.com/nuxt/nuxt/tree/main/docs)",
    )
    parser.add_argument(
        "-o", "--output", default=DEFAULT_OUTPUT,
        help=f"Target file (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--name", default=None,
        help="Project name override (defaults to repo name)",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print a JSON summary to stdout",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def run(args: argparse.Namespace, cwd: Path) -> dict[str, Any]:
    """Fetch, index and inject; returns the run summary."""
    log.info("Parsing GitHub URL...")
    parsed = parse_github_url(args.github_url)
    project_name = args.name or parsed.repo
    key = repo_key(parsed.owner, parsed.repo)
    log.info(
        "  repo: %s/%s, branch: %s, path: %s",
        parsed.owner, parsed.repo, parsed.branch, parsed.docs_path,
    )

    log.info("Downloading documentation...")
    result = pull_docs(
        parsed.owner, parsed.repo, parsed.branch, parsed.docs_path, cwd,
    )
    log.info(
        "  Downloaded %d doc files -> %s/", result.file_count, result.local_docs_dir,
    )

    files = collect_doc_files(cwd / result.local_docs_dir)
    if not files:
        raise NoDocsFoundError("No .md/.mdx files found in docs folder.")

    sections = build_doc_tree(files)
    index_content = generate_index(project_name, result.local_docs_dir, sections)

    output_path = (cwd / args.output).resolve()
    existing = read_text_or_empty(output_path)
    replaced = has_block(existing, key)
    write_text(output_path, inject_into_file(existing, index_content, key))
    log.info("  %s %s", "Updated" if replaced else "Added block to", args.output)

    gitignore = ensure_gitignore_entry(cwd, DOCS_BASE_DIR)
    if gitignore.updated:
        log.info("  Added %s/ to .gitignore", DOCS_BASE_DIR)

    log.info("Done! %d docs indexed -> %s [%s]", len(files), args.output, key)
    return {
        "key": key,
        "name": project_name,
        "output": str(output_path),
        "local_docs_dir": result.local_docs_dir,
        "file_count": len(files),
        "section_count": len(sections),
        "indexed_file_count": count_files(sections),
        "block_replaced": replaced,
        "gitignore_updated": gitignore.updated,
    }


def main(argv: list[str] | None = None, *, cwd: Path | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        summary = run(args, cwd or Path.cwd())
    except NoDocsFoundError as exc:
        log.warning("%s", exc)
        return 1
    except DocsToAgentError as exc:
        log.error("Error: %s", exc)
        return 1

    if args.json:
        dump_json(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
