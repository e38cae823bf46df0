"""Entry point for xmapbridge

Loads the XMapLib engine, pushes a preset, selects the mouse stick and keeps
the engine running until Ctrl+C.
"""
import argparse
import logging
import sys
import threading

from core.state import StickSelection
from engine.native import load_engine
from mapper import MappingSession
from presets import ProfileError, build_presets, find_preset, load_presets

LOG = logging.getLogger("xmapbridge")

STICK_CHOICES = {s.label.lower(): s for s in StickSelection}


def build_parser():
    parser = argparse.ArgumentParser(description="xmapbridge: controller → keyboard/mouse via XMapLib")
    parser.add_argument("--profile", help="YAML profile with custom presets (replaces the built-in ones)")
    parser.add_argument("--preset", help="preset name to activate (default: first preset)")
    parser.add_argument("--dll", help="path to XMapLibDLL.dll (default: $XMAPLIB_DLL or XMapLibDLL.dll)")
    parser.add_argument("--stick", choices=sorted(STICK_CHOICES), default="right",
                        help="thumbstick that moves the mouse (default: right)")
    parser.add_argument("--sensitivity", type=int, help="mouse sensitivity, 1-100")
    parser.add_argument("--show", action="store_true",
                        help="print the engine's active maps and exit instead of running")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level (default: INFO)")
    parser.add_argument("--log-format", default="%(levelname)s:%(name)s:%(message)s",
                        help="Logging format string (default: %(levelname)s:%(name)s:%(message)s)")
    parser.add_argument("--debug-modules", nargs="*", default=[],
                        help="Modules to set to DEBUG level (e.g., 'codec', 'mapper', 'engine', 'presets')")
    return parser


def configure_logging(args):
    logging.basicConfig(level=getattr(logging, args.log_level), format=args.log_format)
    module_map = {
        "codec": "xmapbridge.codec",
        "mapper": "xmapbridge.mapper",
        "engine": "xmapbridge.engine",
        "dry_run": "xmapbridge.dry_run",
        "presets": "xmapbridge.presets",
    }
    for module in args.debug_modules:
        logger_name = module_map.get(module, f"xmapbridge.{module}")
        logging.getLogger(logger_name).setLevel(logging.DEBUG)


def select_preset(args):
    presets = load_presets(args.profile) if args.profile else build_presets()
    if not args.preset:
        return presets[0]
    preset = find_preset(presets, args.preset)
    if preset is None:
        names = ", ".join(p.name for p in presets)
        raise ProfileError(f"no preset named {args.preset!r} (have: {names})")
    return preset


def main(argv=None, stop_event=None):
    args = build_parser().parse_args(argv)
    configure_logging(args)

    try:
        preset = select_preset(args)
    except (OSError, ProfileError) as e:
        LOG.error("%s", e)
        return 2

    engine = load_engine(args.dll)
    session = MappingSession(engine)

    if args.show:
        print(session.summary())
        return 0

    engine.init_both()
    try:
        if not session.apply_preset(preset):
            LOG.error("Error updating maps for preset %s", preset.name)
        session.set_stick(STICK_CHOICES[args.stick])
        if args.sensitivity is not None and not session.set_sensitivity(args.sensitivity):
            LOG.warning("sensitivity %d not accepted, keeping %s", args.sensitivity, session.sensitivity())
        LOG.info("controller %s", "connected" if session.is_controller_connected() else "not connected")
        LOG.info("%s", session.summary())

        stop_event = stop_event or threading.Event()
        LOG.info("xmapbridge running, press Ctrl+C to stop")
        while not stop_event.is_set():
            stop_event.wait(0.5)
    except KeyboardInterrupt:
        LOG.info("shutdown requested")
    finally:
        engine.stop_both()
    return 0


if __name__ == "__main__":
    sys.exit(main())
