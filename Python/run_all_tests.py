import glob
import os
import subprocess
import sys

def run_tests():
    test_files = sorted(glob.glob("tests/*.zs"))

    print(f"Running {len(test_files)} programs...\n")

    failed = 0
    for test_file in test_files:
        test_name = os.path.basename(test_file)
        print(f"--- Running {test_name} ---")

        result = subprocess.run(
            [sys.executable, "Python/main.py", test_file],
            capture_output=True,
            text=True,
            encoding='utf-8'
        )

        if result.stdout:
            print(result.stdout.rstrip())
        if result.stderr:
            print(f"Error:\n{result.stderr}")
        if result.returncode != 0:
            failed += 1

        print()

    print(f"{len(test_files) - failed} passed, {failed} failed")
    return 1 if failed else 0

if __name__ == "__main__":
    sys.exit(run_tests())
