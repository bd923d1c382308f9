# launcher/ios_icons.py - iOS AppIcon.appiconset
import os
import json
import math

from .icon_gen import load_source, resize_square, run_batch

# (point size, scale, idiom)
IOS_ICON_SIZES = [
    (20, 2, 'iphone'),
    (20, 3, 'iphone'),
    (29, 2, 'iphone'),
    (29, 1, 'iphone'),
    (29, 3, 'iphone'),
    (40, 2, 'iphone'),
    (40, 3, 'iphone'),
    (57, 1, 'iphone'),
    (57, 2, 'iphone'),
    (60, 2, 'iphone'),
    (60, 3, 'iphone'),
    (1024, 1, 'iphone'),
    (20, 1, 'ipad'),
    (20, 2, 'ipad'),
    (29, 1, 'ipad'),
    (29, 2, 'ipad'),
    (40, 1, 'ipad'),
    (40, 2, 'ipad'),
    (50, 1, 'ipad'),
    (50, 2, 'ipad'),
    (72, 1, 'ipad'),
    (72, 2, 'ipad'),
    (76, 2, 'ipad'),
    (76, 1, 'ipad'),
    (83.5, 2, 'ipad'),
]
CONTENTS_FILENAME = 'Contents.json'


def pixel_size(size, scale) -> int:
    return math.ceil(size * scale)


def icon_record(entry) -> dict:
    size, scale, idiom = entry
    px = pixel_size(size, scale)
    return {
        "size": f"{px}x{px}",
        "idiom": idiom,
        "filename": f"{px}.png",
        "scale": f"{scale}x",
    }


def ios_contents(records) -> dict:
    return {
        "images": list(records),
        "info": {
            "version": 1,
            "author": "xcode"
        }
    }


def generate_ios_icons(input_path, output_folder):
    """
    生成 iOS 图标 + Contents.json
    Entries that share a pixel size write the same file; the last one wins.
    """

    def write_icon(entry):
        record = icon_record(entry)
        px = pixel_size(entry[0], entry[1])
        resize_square(img, px).save(os.path.join(output_folder, record["filename"]), format='PNG')
        return record

    try:
        os.makedirs(output_folder, exist_ok=True)
        img = load_source(input_path)
        records = run_batch(write_icon, IOS_ICON_SIZES)

        with open(os.path.join(output_folder, CONTENTS_FILENAME), "w", encoding="utf-8") as f:
            json.dump(ios_contents(records), f, indent=2)
    except Exception as e:
        print(f"[ERROR] Generating iOS icons failed: {e}", flush=True)
        return False

    print(f"[IOS] iOS icons generated in {output_folder}", flush=True)
    return True
