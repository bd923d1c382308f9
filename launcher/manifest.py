# launcher/manifest.py - point AndroidManifest.xml at the generated launcher icon
import io
import re
import xml.etree.ElementTree as ET

ANDROID_NS = 'http://schemas.android.com/apk/res/android'
ICON_ATTR = f'{{{ANDROID_NS}}}icon'
XML_HEADER = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'


class ManifestError(Exception):
    pass


def _register_namespaces(text):
    # keep the document's own prefixes (android:, tools:) instead of ns0:, ns1:
    # ElementTree's prefix table is process-wide, registrations outlive this call
    parser = ET.XMLPullParser(events=('start-ns',))
    parser.feed(text)
    for _event, (prefix, uri) in parser.read_events():
        if prefix and not re.match(r'ns\d+$', prefix):
            ET.register_namespace(prefix, uri)
    parser.close()


def parse_manifest(text):
    _register_namespaces(text)
    return ET.parse(io.StringIO(text)).getroot()


def serialize_manifest(doc):
    return XML_HEADER + ET.tostring(doc, encoding='unicode')


def patch_manifest_icon(doc, icon_name):
    """Set manifest/application[0]/@android:icon to @mipmap/<icon_name>."""
    if doc.tag != 'manifest':
        raise ManifestError(f'root element is <{doc.tag}>, expected <manifest>')
    application = doc.find('application')
    if application is None:
        raise ManifestError('no <application> element')
    if ICON_ATTR not in application.attrib:
        raise ManifestError('<application> has no android:icon attribute')
    application.set(ICON_ATTR, f'@mipmap/{icon_name}')
    return doc


def update_manifest_icon(manifest_path, icon_name, rounded=False):
    kind = 'rounded' if rounded else 'regular'
    try:
        with open(manifest_path, 'r', encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"[ERROR] Reading {manifest_path} failed: {e}", flush=True)
        return False

    try:
        doc = patch_manifest_icon(parse_manifest(text), icon_name)
    except (ET.ParseError, ManifestError) as e:
        print(f"[ERROR] Parsing {manifest_path} failed: {e}", flush=True)
        return False

    try:
        with open(manifest_path, 'w', encoding='utf-8') as f:
            f.write(serialize_manifest(doc))
    except OSError as e:
        print(f"[ERROR] Writing {manifest_path} failed: {e}", flush=True)
        return False

    print(f"[MANIFEST] AndroidManifest.xml updated with {kind} icon @mipmap/{icon_name}", flush=True)
    return True
