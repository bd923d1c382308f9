# launcher/icon_gen.py - Android mipmap launcher icons (regular + round)
import os
from concurrent.futures import ThreadPoolExecutor, as_completed

from PIL import Image, ImageChops, ImageDraw, ImageOps

MIPMAP_SIZES = [
    ('mipmap-mdpi', 48),
    ('mipmap-hdpi', 72),
    ('mipmap-xhdpi', 96),
    ('mipmap-xxhdpi', 144),
    ('mipmap-xxxhdpi', 192),
]
ICON_NAME = 'ic_launcher'
ROUND_ICON_NAME = 'ic_launcher_round'
CORNER_RATIO = 0.1


class IconBatchError(Exception):
    """One or more icons of a batch failed; ``errors`` holds (item, exception)."""

    def __init__(self, errors):
        self.errors = errors
        item, first = errors[0]
        super().__init__(f"{len(errors)} icon(s) failed, first: {item!r}: {first}")


def run_batch(task, items):
    """Run ``task(item)`` for every item concurrently and wait for all of them.

    Results come back in completion order. Any failure raises IconBatchError
    once the whole batch has finished.
    """
    results, errors = [], []
    with ThreadPoolExecutor(max_workers=len(items) or 1) as pool:
        futures = {pool.submit(task, item): item for item in items}
        for fut in as_completed(futures):
            try:
                results.append(fut.result())
            except Exception as e:
                errors.append((futures[fut], e))
    if errors:
        raise IconBatchError(errors)
    return results


def load_source(input_path):
    with Image.open(input_path) as img:
        return img.convert('RGBA')


def resize_square(img, size):
    return img.resize((size, size), Image.LANCZOS)


def fit_square(img, size):
    # scale to cover, then centre-crop to a square
    return ImageOps.fit(img, (size, size), Image.LANCZOS)


def round_corners(img, ratio=CORNER_RATIO):
    # keep the image only where the rounded rect mask is drawn
    size = img.size
    mask = Image.new('L', size, 0)
    radius = size[0] * ratio
    ImageDraw.Draw(mask).rounded_rectangle((0, 0, size[0] - 1, size[1] - 1), radius=radius, fill=255)
    out = img.copy()
    out.putalpha(ImageChops.multiply(img.getchannel('A'), mask))
    return out


def icon_filename(rounded=False):
    return f"{ROUND_ICON_NAME if rounded else ICON_NAME}.png"


def generate_mipmap_icons(input_path, out_res_dir, rounded=False):
    kind = 'rounded' if rounded else 'regular'
    filename = icon_filename(rounded)

    def write_icon(entry):
        folder, size = entry
        dst = os.path.join(out_res_dir, folder)
        os.makedirs(dst, exist_ok=True)
        icon = fit_square(img, size)
        if rounded:
            icon = round_corners(icon)
        out = os.path.join(dst, filename)
        icon.save(out, format='PNG')
        return out

    try:
        img = load_source(input_path)
        run_batch(write_icon, MIPMAP_SIZES)
    except Exception as e:
        print(f"[ERROR] Generating {kind} mipmap icons failed: {e}", flush=True)
        return False

    print(f"[ANDROID] {kind.capitalize()} mipmap icons generated in {out_res_dir}", flush=True)
    return True
