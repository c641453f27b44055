"""Точка входа: демо-окно или рендер одного размера в файл."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Tuple

from ninepatch.config import AppConfig
from ninepatch.errors import NinePatchError
from ninepatch.services.image_service import ImageService
from ninepatch.services.nine_patch import NinePatch

logger = logging.getLogger(__name__)


def parse_size(value: str) -> Tuple[int, int]:
    """Разбирает строку вида ``200x48`` в пару (ширина, высота)."""
    parts = value.lower().replace("×", "x").split("x")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Ожидался размер ШИРИНАxВЫСОТА, получено {value!r}")
    try:
        width, height = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Размер должен состоять из целых чисел: {value!r}") from exc
    if width < 0 or height < 0:
        raise argparse.ArgumentTypeError(f"Размер не может быть отрицательным: {value!r}")
    return width, height


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ninepatch", description="Растягивание nine-patch изображений.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging.")
    sub = parser.add_subparsers(dest="command")

    view = sub.add_parser("view", help="Открыть демо-окно с тремя кнопками.")
    view.add_argument("image", nargs="?", type=Path, help="Nine-patch файл (по умолчанию встроенный образец).")

    render = sub.add_parser("render", help="Отрендерить один размер в файл.")
    render.add_argument("image", type=Path, help="Nine-patch файл.")
    render.add_argument("size", type=parse_size, help="Размер результата, например 200x48.")
    render.add_argument("-o", "--output", type=Path, required=True, help="Куда сохранить результат.")
    return parser


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def run_render(image: Path, size: Tuple[int, int], output: Path, service: Optional[ImageService] = None) -> int:
    """Рендерит ``image`` в размер ``size`` и сохраняет в ``output``. Возвращает код выхода."""
    service = service or ImageService()
    try:
        image_data = service.load_image(image)
        rendered = NinePatch(image_data.pixels).size_of(*size)
        saved = service.save_image(rendered, output)
    except (OSError, ValueError, NinePatchError) as exc:
        logger.error("%s", exc)
        return 1
    logger.info("Сохранено %s (%dx%d)", saved, rendered.shape[1], rendered.shape[0])
    return 0


def run_view(config: AppConfig) -> int:
    # импорт здесь, чтобы рендер в файл работал без Tk
    from ninepatch.app import NinePatchDemoApp

    app = NinePatchDemoApp(config)
    app.mainloop()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Разбирает аргументы и запускает выбранную команду (по умолчанию окно)."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "render":
        return run_render(args.image, args.size, args.output)

    config = AppConfig()
    image = getattr(args, "image", None)
    if image is not None:
        config = replace(config, image_path=image)
    return run_view(config)


if __name__ == "__main__":
    sys.exit(main())
