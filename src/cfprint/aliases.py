from cfprint.core.models import FingerprintMode

MODE_ALIASES = {
    "standard": FingerprintMode.STANDARD,
    "std": FingerprintMode.STANDARD,
    "normalized": FingerprintMode.NORMALIZED,
    "norm": FingerprintMode.NORMALIZED,
}

MODE_CHOICES = list(MODE_ALIASES.keys())

MODE_HELP_TEXT = (
    "Preprocessing applied before hashing:\n"
    f"  standard   : {FingerprintMode.STANDARD.description}\n"
    f"  normalized : {FingerprintMode.NORMALIZED.description}\n"
    "Default: standard"
)

EPILOG_TEXT = """
Examples:
  Fingerprint a single file
  %(prog)s ~/mods/jei.jar

  Fingerprint data piped on stdin
  cat jei.jar | %(prog)s -

  Fingerprint every .jar in a folder and print JSON (path -> fingerprint)
  %(prog)s -i ~/mods -x .jar --json

  Find files with the same content, ignoring whitespace differences
  %(prog)s -i ~/mods -x .jar --duplicates

  Same as above, but only report byte-identical copies
  %(prog)s -i ~/mods -x .jar --duplicates --exact
"""
