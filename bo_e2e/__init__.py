"""
Back-office E2E library

Page objects, demo data and helpers shared by the Playwright regression
campaigns under tests/e2e/.
"""

__version__ = "0.1.0"
