from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys

logger = logging.getLogger(__name__)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_to_jd(args: argparse.Namespace) -> int:
    import calsys

    jd = calsys.ymd_to_jd(args.year, args.month, args.day, calendar=args.calendar)
    print(jd)
    return 0


def cmd_from_jd(args: argparse.Namespace) -> int:
    import calsys

    info = calsys.date_info(args.jd, calendar=args.calendar, attributes=tuple(args.attr), debug=args.debug)
    print(info.date)
    for key, value in (info.attributes or {}).items():
        print(f"  {key}: {value}")
    if info.debug:
        for key, value in info.debug.items():
            print(f"  [debug] {key}: {value}")
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    import calsys

    out = calsys.convert(args.year, args.month, args.day, source=args.source, target=args.target)
    print(out)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    import calsys

    for name in calsys.list_calendars():
        info = calsys.calendar_info(name)
        print(f"{name:10s} months={info['months']:2d}  jd {info['jd_start']}..{info['jd_end']}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="calsys", description="Calendar conversion toolkit CLI.")
    p.add_argument("-v", "--verbose", action="count", default=0, help="more logging (repeatable)")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_to = sub.add_parser("to-jd", help="Civil date -> Julian Day Number")
    p_to.add_argument("calendar")
    p_to.add_argument("year", type=int)
    p_to.add_argument("month", type=int)
    p_to.add_argument("day", type=int)

    p_from = sub.add_parser("from-jd", help="Julian Day Number -> civil date")
    p_from.add_argument("jd", type=int)
    p_from.add_argument("--calendar", default="gregorian")
    p_from.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    p_from.add_argument("--debug", action="store_true")

    p_conv = sub.add_parser("convert", help="Convert a civil date between calendars")
    p_conv.add_argument("year", type=int)
    p_conv.add_argument("month", type=int)
    p_conv.add_argument("day", type=int)
    p_conv.add_argument("--from", dest="source", default="gregorian")
    p_conv.add_argument("--to", dest="target", required=True)

    sub.add_parser("list", help="List registered calendars")

    # diagnostics
    sub.add_parser("month", help="Print a month grid (diagnostics)")
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip", "leap-years"], help="Which diagnostic to run")
    return p


def main(argv: list[str] | None = None) -> int:
    from calsys.core.errors import CalsysError

    if argv is None:
        argv = sys.argv[1:]

    p = build_parser()
    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.WARNING - 10 * min(args.verbose, 2),
        format="%(levelname)s %(name)s: %(message)s",
    )

    handlers = {
        "to-jd": cmd_to_jd,
        "from-jd": cmd_from_jd,
        "convert": cmd_convert,
        "list": cmd_list,
    }
    try:
        if args.cmd in handlers:
            if rest:
                p.error(f"unrecognized arguments: {' '.join(rest)}")
            return handlers[args.cmd](args)

        if args.cmd == "month":
            return _run_module_main("calsys.diagnostics.pretty_month", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "calsys.diagnostics.round_trip",
                "leap-years": "calsys.diagnostics.leap_years",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except CalsysError as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"calsys: error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
