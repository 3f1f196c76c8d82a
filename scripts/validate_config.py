#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from agrex_app.config.loader import ConfigLoader
from agrex_app.config.validation import ConfigValidator, ValidationError


def validate_settings(config_dir: Path) -> List[ValidationError]:
    """Validate the merged configuration for a config directory."""
    loader = ConfigLoader.create(config_dir)
    return ConfigValidator.validate_config(loader.merge_config())


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else project_root / "config"
    print(f"🔍 Validating AgrEx configuration in {config_dir}...")

    all_valid = True

    try:
        errors = validate_settings(config_dir)
        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print("✅ settings.yaml merged with defaults is valid")
    except Exception as e:
        print(f"❌ Error loading configuration: {e}")
        all_valid = False

    print("\n📋 Testing per-run overrides...")
    test_overrides = {
        "strategy": {"kind": "seasonal", "horizon_days": 60},
        "report": {"provider": "none"},
    }

    try:
        loader = ConfigLoader.create(config_dir)
        errors = ConfigValidator.validate_config(loader.merge_config(test_overrides))
        if errors:
            print("❌ Override validation failed:")
            for error in errors:
                print(f"  • {error.field}: {error.message}")
            all_valid = False
        else:
            loader.build_config(test_overrides)
            print("✅ Override validation passed")
    except Exception as e:
        print(f"❌ Error testing overrides: {e}")
        all_valid = False

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
