from __future__ import annotations

from PIL import Image
import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from colorpicker import ColorEngine, ColorInfo, PaletteScheme, RGBColor, format_color_values, hex_to_rgb, rgb_to_hex
from colorpicker.config import PickerConfig
from colorpicker.conversions import name_to_rgb
from colorpicker.history import ColorHistory, export_palette
from colorpicker.sampler import ImageSampler

ANSI_RESET = '\033[0m'
ANSI_DIM = '\033[2m'

SWATCH_SIZE = 64


def parse_color(value: str) -> RGBColor:
    """argparse type: ``R,G,B``, a hex code, or a CSS color name."""
    text = value.strip()
    if ',' in text:
        parts = [part.strip() for part in text.split(',')]
        if len(parts) != 3:
            raise argparse.ArgumentTypeError(f"Expected three comma-separated channels, got '{value}'.")
        try:
            return RGBColor.from_values(*parts)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from None
    try:
        return hex_to_rgb(text)
    except ValueError:
        pass
    try:
        return name_to_rgb(text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid color '{value}'. Use R,G,B, a hex code or a CSS color name."
        ) from None


def color_enabled() -> bool:
    return sys.stdout.isatty() and os.getenv('NO_COLOR') is None


def swatch(color: RGBColor, enabled: bool) -> str:
    if not enabled:
        return ''
    return f"\033[48;2;{color.r};{color.g};{color.b}m    {ANSI_RESET} "


def config_from_args(args) -> PickerConfig:
    config = PickerConfig()
    if args.dataset:
        config.dataset_path = Path(os.path.expanduser(args.dataset))
    if args.history_file:
        config.history_path = Path(os.path.expanduser(args.history_file))
    return config


def format_info_lines(info: ColorInfo, use_color: bool = False) -> List[str]:
    formatted = format_color_values(info)
    return [
        f"Color:        {swatch(info.rgb, use_color)}{formatted['hex']}",
        f"RGB:          {formatted['rgb']}",
        f"HSL:          {formatted['hsl']}",
        f"HSV:          {formatted['hsv']}",
        f"Named color:  {formatted['named_color']} "
        f"({formatted['confidence']}% match, {formatted['confidence_level']})",
        f"Brightness:   {formatted['brightness']}",
        f"Luminance:    {formatted['luminance']}",
        f"Temperature:  {formatted['temperature']}",
    ]


def info_payload(info: ColorInfo) -> dict:
    return {'info': info.as_dict(), 'formatted': format_color_values(info)}


def build_preview(palette: Sequence[RGBColor], path: Path, size: int = SWATCH_SIZE) -> None:
    if not palette:
        return
    img = Image.new('RGB', (size * len(palette), size))
    for idx, color in enumerate(palette):
        img.paste(color.as_tuple(), (idx * size, 0, (idx + 1) * size, size))
    path.parent.mkdir(parents=True, exist_ok=True)
    img.save(path)
    print(f"Preview image saved to {path}")


def run_info(args) -> None:
    config = config_from_args(args)
    engine = ColorEngine.from_path(config.dataset_path)
    info = engine.get_color_info(*args.color.as_tuple())
    if args.json:
        print(json.dumps(info_payload(info), indent=2))
        return
    print('\n'.join(format_info_lines(info, color_enabled())))


def run_pick(args) -> None:
    config = config_from_args(args)
    try:
        sampler = ImageSampler.open(args.image, config)
        pixel = sampler.get_pixel_color(args.x, args.y)
    except (FileNotFoundError, ValueError) as exc:
        print(f"Error: {exc}")
        raise SystemExit(1)

    engine = ColorEngine.from_path(config.dataset_path)
    info = engine.get_color_info(pixel.r, pixel.g, pixel.b)
    if not args.no_history:
        history = ColorHistory.load(config.history_path, config.history_size)
        history.add(pixel.r, pixel.g, pixel.b)

    if args.json:
        payload = info_payload(info)
        payload['image'] = sampler.describe()
        payload['pixel'] = {'x': pixel.x, 'y': pixel.y, 'a': pixel.a}
        print(json.dumps(payload, indent=2))
        return
    print(f"Image:        {sampler.describe()}")
    print(f"Pixel:        ({pixel.x}, {pixel.y})")
    print('\n'.join(format_info_lines(info, color_enabled())))


def run_palette(args) -> None:
    color = args.color
    engine = ColorEngine.from_path(config_from_args(args).dataset_path)
    palette = engine.generate_palette(*color.as_tuple(), args.scheme)
    if args.json:
        print(json.dumps({
            'scheme': args.scheme,
            'base': color.as_dict(),
            'colors': [entry.as_dict() for entry in palette],
        }, indent=2))
    else:
        use_color = color_enabled()
        print(f"{args.scheme.capitalize()} palette for {color.r}, {color.g}, {color.b}:")
        for entry in palette:
            name = engine.find_closest_named_color(*entry.as_tuple()).name
            if use_color:
                name = f"{ANSI_DIM}{name}{ANSI_RESET}"
            print(f"  {swatch(entry, use_color)}{rgb_to_hex(*entry.as_tuple())}  {name}")
    if args.preview:
        build_preview(palette, Path(os.path.expanduser(args.preview)))


def run_history(args) -> None:
    config = config_from_args(args)
    history = ColorHistory.load(config.history_path, config.history_size)

    if args.clear:
        if history.clear():
            print('Color history cleared')
        else:
            print('History is already empty')
        return

    if args.select:
        entry = history.find(args.select)
        if entry is None:
            print(f"Error: {args.select} is not in history")
            raise SystemExit(1)
        # selecting shows the color again without re-recording it
        engine = ColorEngine.from_path(config.dataset_path)
        info = engine.get_color_info(entry.r, entry.g, entry.b)
        print(f"Selected color: {entry.hex}")
        print('\n'.join(format_info_lines(info, color_enabled())))
        return

    if args.export:
        engine = ColorEngine.from_path(config.dataset_path)
        try:
            path = export_palette(history, engine.dataset, args.export)
        except ValueError as exc:
            print(f"Warning: {exc}")
            raise SystemExit(1)
        print(f"Palette saved to {path}")
        return

    if not len(history):
        print('No colors picked yet')
        return
    use_color = color_enabled()
    for idx, entry in enumerate(history, start=1):
        rgb = RGBColor(entry.r, entry.g, entry.b)
        print(f"{idx:2d}. {swatch(rgb, use_color)}{entry.hex}  rgb({entry.r}, {entry.g}, {entry.b})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='picker.py', description='Color picker toolkit')
    parser.add_argument('--dataset', help='Named color JSON file (default: bundled colors.json)')
    parser.add_argument('--history-file', help='History JSON file (default: ~/.color_picker_history.json)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    info = subparsers.add_parser('info', help='Describe a color in every supported format')
    info.set_defaults(func=run_info)
    info.add_argument('color', type=parse_color, help='Color as R,G,B, hex (#ff8800) or CSS name')
    info.add_argument('--json', action='store_true', help='Print JSON instead of text')

    pick = subparsers.add_parser('pick', help='Sample a pixel from an image')
    pick.set_defaults(func=run_pick)
    pick.add_argument('image', help='Path to input image')
    pick.add_argument('x', type=float, help='Pixel column (after resizing to at most 2000px)')
    pick.add_argument('y', type=float, help='Pixel row (after resizing to at most 2000px)')
    pick.add_argument('--no-history', action='store_true', help='Do not record the color in history')
    pick.add_argument('--json', action='store_true', help='Print JSON instead of text')

    palette = subparsers.add_parser('palette', help='Generate a palette from a base color')
    palette.set_defaults(func=run_palette)
    palette.add_argument('color', type=parse_color, help='Base color as R,G,B, hex or CSS name')
    palette.add_argument('-s', '--scheme', choices=[scheme.value for scheme in PaletteScheme],
                         default=PaletteScheme.MONOCHROMATIC.value, help='Palette scheme (default: monochromatic)')
    palette.add_argument('--preview', help='Save a swatch PNG to this path')
    palette.add_argument('--json', action='store_true', help='Print JSON instead of text')

    history = subparsers.add_parser('history', help='Show, select, clear or export recent colors')
    history.set_defaults(func=run_history)
    history.add_argument('--clear', action='store_true', help='Remove every color from history')
    history.add_argument('--export', help='Write history as a palette JSON file')
    history.add_argument('--select', metavar='HEX', help='Show a color from history without recording it again')

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s: %(name)s: %(message)s',
    )
    if hasattr(args, 'func'):
        args.func(args)
    else:
        parser.print_help()


if __name__ == '__main__':
    main()
