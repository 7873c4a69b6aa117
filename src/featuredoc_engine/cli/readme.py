"""README sync CLI command."""

import argparse
import sys


def cmd_sync(args: argparse.Namespace) -> int:
    from featuredoc_engine.paths import default_window_days, manifest_path, readme_path
    from featuredoc_engine.manifest.loader import ManifestError
    from featuredoc_engine.readme.sync import sync_readme

    days = args.days if args.days is not None else default_window_days()
    manifest = manifest_path()
    readme = readme_path()

    try:
        result = sync_readme(
            manifest_path=manifest,
            readme_path=readme,
            window_days=days,
        )
    except (FileNotFoundError, ManifestError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    sections = ", ".join(result.patch.updated) or "none"
    print(
        f"{readme.name} updated: {result.total} features "
        f"({result.near_term} near-term within {days} days), "
        f"sections: {sections}"
    )
    return 0
