#!/usr/bin/env python3
"""
Test runner for the reminder tool

Runs each test group separately so a failure is easy to locate, then the
whole suite with a coverage report:
1. Review Schedule (interval transitions)
2. Reminder Store (add/list/due/review/remove)
3. Persistence (JSON file repository)
4. Command Line Interface
"""

import subprocess
import sys
import os
from pathlib import Path


def run_command(cmd, description):
    """Run a command and handle errors"""
    print(f"\n{'='*60}")
    print(f"🔄 {description}")
    print(f"{'='*60}")

    try:
        result = subprocess.run(cmd, shell=True, check=True, capture_output=True, text=True)
        print(result.stdout)
        if result.stderr:
            print("STDERR:", result.stderr)
        print(f"✅ {description} completed successfully")
        return True
    except subprocess.CalledProcessError as e:
        print(f"❌ {description} failed")
        print("STDOUT:", e.stdout)
        print("STDERR:", e.stderr)
        return False


def main():
    """Main test runner"""
    print("🚀 Starting Reminder Test Suite")

    project_dir = Path(__file__).parent
    os.chdir(project_dir)

    test_commands = [
        ("python -m pytest tests/test_services/test_interval_schedule.py tests/test_models -v",
         "Review Schedule Tests"),

        ("python -m pytest tests/test_services/test_reminder_service.py -v",
         "Reminder Store Tests"),

        ("python -m pytest tests/test_infrastructure -v",
         "Persistence Tests"),

        ("python -m pytest tests/test_cli.py -v",
         "Command Line Interface Tests"),

        ("python -m pytest tests/ -v --cov=reminder --cov-report=html --cov-report=term-missing",
         "All Tests with Coverage Report"),
    ]

    results = []
    for cmd, description in test_commands:
        success = run_command(cmd, description)
        results.append((description, success))

    print(f"\n{'='*60}")
    print("📊 TEST RESULTS SUMMARY")
    print(f"{'='*60}")

    passed = 0
    failed = 0

    for description, success in results:
        status = "✅ PASSED" if success else "❌ FAILED"
        print(f"{status:<10} {description}")
        if success:
            passed += 1
        else:
            failed += 1

    print(f"\n📈 Overall Results: {passed} passed, {failed} failed")

    coverage_html = project_dir / "htmlcov" / "index.html"
    if coverage_html.exists():
        print(f"📋 Coverage report available at: {coverage_html}")

    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
