"""
Shared pytest configuration for OGZ analyzer tests
"""

import os
import sys

# Allow running the suite from a source checkout without installing
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
