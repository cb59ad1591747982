"""
Contract Deployment Wrapper
Runs scripts/deploy_contract.py from the repository root
"""

import sys

from scripts.deploy_contract import run

if __name__ == "__main__":
    sys.exit(run())
