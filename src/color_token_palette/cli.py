# src/color_token_palette/cli.py
import argparse
import json
import logging
import sys


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ctp",
        description="Inspect and export the palette color tokens.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="List tokens in declaration order")
    p_list.add_argument("--family", help="Only one ladder (e.g. orange, test-primary)")

    p_show = sub.add_parser("show", help="Show one token (e.g. Orange500, colors.orange.500)")
    p_show.add_argument("name")

    p_export = sub.add_parser("export", help="Export tokens as design-token JSON")
    p_export.add_argument("--format", dest="fmt", default=None, help="Token format (default: w3c)")
    p_export.add_argument("--namespace", default=None, help="Prefix for top-level keys")
    p_export.add_argument("--description", default=None, help="Section description (w3c)")
    p_export.add_argument("--output", "-o", default=None, help="Write to file instead of stdout")

    sub.add_parser("formats", help="List available token formats")
    sub.add_parser("check", help="Validate palette invariants")
    return parser


def _cmd_list(args) -> None:
    from .palette import ladder, values

    names = ladder(args.family) if args.family else values()
    for name in names:
        print(f"{name.display_name:<18} {name.path:<28} {name.color.hex}")


def _cmd_show(args) -> None:
    from .palette import parse_color_name

    name = parse_color_name(args.name)
    color = name.color
    info = {
        "name": name.display_name,
        "path": name.path,
        "family": name.family,
        "weight": name.weight,
        "hex": color.hex,
        "argb": f"0x{color.argb:08x}",
        "rgb": list(color.rgb255),
        "components": list(color.components()),
        "css_name": color.css_name(),
    }
    print(json.dumps(info, indent=2, ensure_ascii=False))


def _cmd_export(args) -> None:
    from .export import dump_tokens

    text = dump_tokens(
        args.fmt, args.output, namespace=args.namespace, description=args.description
    )
    if args.output:
        print(f"✅ Wrote tokens to {args.output}")
    else:
        sys.stdout.write(text)


def _cmd_formats(args) -> None:
    from .export import list_available_formats

    print("Available token formats:\n")
    print(list_available_formats())


def _cmd_check(args) -> None:
    from .palette import validate_palette, values

    report = validate_palette()
    print(f"✅ Palette OK: {len(values())} tokens")
    for family, weights in report.items():
        print(f"  {family:<16} {', '.join(map(str, weights))}")


_COMMANDS = {
    "list": _cmd_list,
    "show": _cmd_show,
    "export": _cmd_export,
    "formats": _cmd_formats,
    "check": _cmd_check,
}


def main(argv=None):
    """CLI: list, show, validate and export the palette color tokens."""
    args = _build_parser().parse_args(argv)

    if args.debug:
        from .utils import enable_topics

        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        enable_topics("all")

    try:
        _COMMANDS[args.command](args)
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
