"""
Test Suite for the BrewOS Demo Engine

This module contains tests for:
- Demo mode state management (test_demo_mode.py)
- Usage profiles (test_profiles.py)
- Telemetry synthesis (test_generator.py)
- Static demo content (test_demo_content.py)
- Durable flag store (test_database.py)
- API endpoints (test_api.py)
- Dashboard data sources (test_data_sources.py)

Run tests with:
    pytest tests/ -v
    pytest tests/ --cov=core --cov=engine --cov=api
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
