#!/usr/bin/env python3
"""scd-access CLI - Query and edit spatial content records from the command line.

Usage:
    scd-access list <h3_index> [--keywords KW] [options]
    scd-access get <id> [options]
    scd-access tenant [options]
    scd-access post <file> [options]
    scd-access put <id> <file> [options]
    scd-access delete <id> [options]
    scd-access validate <file>... [--with-id] [--json]

Commands:
    list        Show records at an (approximate) location
    get         Show the record with the given id
    tenant      Show all records of the tenant authorized by the token
    post        Validate a .json file and post it as a new record
    put         Validate a .json file and replace the record with the given id
    delete      Delete the record with the given id
    validate    Validate .json files against the record schema

Service URL, topic and token default to SCD_SERVICE_URL, SCD_TOPIC and
SCD_TOKEN (a .env file is read if present).

Examples:
    scd-access --url https://scd.example.org --topic 3d list 8928308280fffff
    scd-access --local list 8928308280fffff --json
    scd-access validate record.json --with-id
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import requests

from .config import Config
from .core.schema import SCR_NO_ID_SCHEMA, SCR_SCHEMA
from .exceptions import SCDError
from .utils.files import read_text
from .utils.logging import setup_logging
from .validator import ValidationResult, validate


def get_version():
    """Get package version."""
    from scd_access import __version__
    return __version__


def format_record_text(scr) -> str:
    """One-line summary of a record."""
    position = scr.content.geopose.position
    return (
        f"{scr.id}  [{scr.content.type}] {scr.content.title}"
        f"  @ {position.lat:.6f}, {position.lon:.6f}, h={position.h}"
    )


def print_records(records, json_output: bool) -> None:
    if json_output:
        print(json.dumps([r.to_dict() for r in records], indent=2))
        return
    for scr in records:
        print(format_record_text(scr))
    print(f"{len(records)} record(s)")


def format_result_json(result: ValidationResult, path: Path) -> dict:
    """Format validation result as JSON-serializable dict."""
    return {
        "file": str(path),
        "valid": result.valid,
        "parse_error": result.parse_error,
        "violations": [
            {"code": v.code, "path": v.path, "message": v.message}
            for v in result.violations
        ],
    }


def build_client(args):
    from .client import SCDClient

    config = Config.from_env(args.env_file)
    if args.url:
        config.service_url = args.url
    if args.topic:
        config.topic = args.topic
    if args.token:
        config.token = args.token
    if args.local:
        config.local = True
    return SCDClient(config)


def cmd_list(args):
    client = build_client(args)
    records = client.get_contents_at_location(None, None, args.h3_index, args.keywords or "")
    print_records(records, args.json_output)
    return 0


def cmd_get(args):
    client = build_client(args)
    scr = client.get_content_with_id(None, None, args.id)
    print_records([scr], args.json_output)
    return 0


def cmd_tenant(args):
    client = build_client(args)
    records = client.search_contents_for_tenant(None, None)
    print_records(records, args.json_output)
    return 0


def cmd_post(args):
    client = build_client(args)
    print(client.post_scr_file(None, None, args.file))
    return 0


def cmd_put(args):
    client = build_client(args)
    path = Path(args.file)
    scr = validate(read_text(path), schema=SCR_SCHEMA, source=path.name).unwrap()
    print(client.put_content(None, None, scr, args.id))
    return 0


def cmd_delete(args):
    client = build_client(args)
    print(client.delete_with_id(None, None, args.id))
    return 0


def cmd_validate(args):
    schema = SCR_SCHEMA if args.with_id else SCR_NO_ID_SCHEMA

    results = []
    for path in args.files:
        path = Path(path)
        results.append((path, validate(read_text(path), schema=schema, source=path.name)))

    if args.json_output:
        output = {
            "results": [format_result_json(r, p) for p, r in results],
            "summary": {
                "total": len(results),
                "valid": sum(1 for _, r in results if r.valid),
                "invalid": sum(1 for _, r in results if not r.valid),
            },
        }
        print(json.dumps(output, indent=2))
    else:
        for path, result in results:
            print(str(result))
        if len(results) > 1:
            valid_count = sum(1 for _, r in results if r.valid)
            print(f"Summary: {valid_count}/{len(results)} files valid")

    return 0 if all(r.valid for _, r in results) else 1


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="scd-access",
        description="scd-access - Spatial content discovery client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  scd-access --url https://scd.example.org --topic 3d list 8928308280fffff
  scd-access --local list 8928308280fffff --json
  scd-access --token $TOKEN post record.json
  scd-access validate record.json --with-id
        """
    )
    parser.add_argument("--version", action="version", version=f"scd-access {get_version()}")
    parser.add_argument("--url", help="Service URL (or set SCD_SERVICE_URL)")
    parser.add_argument("--topic", help="Content topic (or set SCD_TOPIC)")
    parser.add_argument("--token", help="Bearer token (or set SCD_TOKEN)")
    parser.add_argument("--local", action="store_true",
                        help="Return local records, no server access")
    parser.add_argument("--env-file", help="Path to a .env file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    parser.add_argument("--log-file", help="Also write logs to this file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_json_flag(sub):
        sub.add_argument("--json", action="store_true", dest="json_output",
                         help="Output results as JSON")

    list_parser = subparsers.add_parser("list", help="Show records at a location")
    list_parser.add_argument("h3_index", help="H3 index of the approximate location")
    list_parser.add_argument("--keywords", help="Keywords filter")
    add_json_flag(list_parser)

    get_parser = subparsers.add_parser("get", help="Show the record with the given id")
    get_parser.add_argument("id", help="Record id")
    add_json_flag(get_parser)

    tenant_parser = subparsers.add_parser("tenant", help="Show all records of the tenant")
    add_json_flag(tenant_parser)

    post_parser = subparsers.add_parser("post", help="Post a .json file as a new record")
    post_parser.add_argument("file", help="Record file (SCR without id)")

    put_parser = subparsers.add_parser("put", help="Replace a record with a .json file")
    put_parser.add_argument("id", help="Record id")
    put_parser.add_argument("file", help="Record file (full SCR)")

    delete_parser = subparsers.add_parser("delete", help="Delete the record with the given id")
    delete_parser.add_argument("id", help="Record id")

    validate_parser = subparsers.add_parser("validate", help="Validate .json record files")
    validate_parser.add_argument("files", nargs="+", help="Record file(s) to validate")
    validate_parser.add_argument("--with-id", action="store_true",
                                 help="Validate against the full SCR (with id)")
    add_json_flag(validate_parser)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(verbose=args.verbose, log_file=args.log_file)

    commands = {
        "list": cmd_list,
        "get": cmd_get,
        "tenant": cmd_tenant,
        "post": cmd_post,
        "put": cmd_put,
        "delete": cmd_delete,
        "validate": cmd_validate,
    }

    try:
        return commands[args.command](args)
    except SCDError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except requests.exceptions.RequestException as e:
        print(f"Error: transport failure: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
