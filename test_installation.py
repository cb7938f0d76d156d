#!/usr/bin/env python3
"""
Test script to verify NoEXIF installation.
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))


def test_imports():
    """Test that all modules can be imported."""
    print("Testing module imports...")

    try:
        from core import Application, ExifStripper, HashRenamer, WindowsIntegration
        print("  ✓ Core modules")
    except ImportError as e:
        print(f"  ✗ Core modules: {e}")
        return False

    try:
        from ui import DialogNotifier
        print("  ✓ UI components")
    except ImportError as e:
        print(f"  ✗ UI components: {e}")
        return False

    return True


def test_dependencies():
    """Test that required packages are installed."""
    print("\nTesting dependencies...")

    packages = [
        ('PyQt6', 'PyQt6.QtWidgets'),
        ('Pillow', 'PIL'),
    ]

    all_installed = True
    for name, module in packages:
        try:
            __import__(module)
            print(f"  ✓ {name}")
        except ImportError:
            print(f"  ✗ {name} - Not installed")
            all_installed = False

    return all_installed


def test_image_formats():
    """Test that common photo formats can be read."""
    print("\nTesting image formats...")

    try:
        from core import FileManager

        extensions = FileManager.readable_extensions()
        missing = [ext for ext in ('.jpg', '.png', '.tif', '.webp') if ext not in extensions]
        if missing:
            print(f"  ✗ Missing readers for: {', '.join(missing)}")
            return False

        print(f"  ✓ {len(extensions)} readable extensions")
        return True

    except Exception as e:
        print(f"  ✗ Image formats: {e}")
        return False


def test_registration_state():
    """Report whether the context menu is registered (informational)."""
    print("\nChecking context menu registration...")

    if sys.platform != "win32":
        print("  ○ Not running on Windows")
        return

    try:
        from core import AppConfig, WindowsIntegration
        from core import elevation

        config = AppConfig.from_environment(script=str(Path(__file__).parent / "main.py"))
        integration = WindowsIntegration(config)
        if integration.is_registered():
            print("  ✓ Context menu entries registered")
        else:
            print("  ○ Context menu not registered (run main.py once)")
        print(f"  {'✓' if elevation.is_elevated() else '○'} Running as administrator: {elevation.is_elevated()}")
    except OSError as e:
        print(f"  ✗ Registry access failed: {e}")


def main():
    """Run all tests."""
    print("=" * 60)
    print("NoEXIF - Installation Test")
    print("=" * 60)

    results = []

    # Run tests
    results.append(("Module Imports", test_imports()))
    results.append(("Dependencies", test_dependencies()))
    results.append(("Image Formats", test_image_formats()))

    # Registry check (informational)
    test_registration_state()

    # Summary
    print("\n" + "=" * 60)
    print("Test Summary:")
    print("=" * 60)

    for name, passed in results:
        status = "✓ PASSED" if passed else "✗ FAILED"
        print(f"{name}: {status}")

    all_passed = all(result[1] for result in results)

    print("\n" + "=" * 60)
    if all_passed:
        print("All tests passed! Installation is complete.")
        print("\nRegister the context menu with: python main.py")
    else:
        print("Some tests failed. Please install missing dependencies:")
        print("  pip install -e .")
    print("=" * 60)

    return 0 if all_passed else 1


if __name__ == '__main__':
    sys.exit(main())
