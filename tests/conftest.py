"""
Pytest configuration.

Puts ``src`` on ``sys.path`` so the test modules import the local ``ndcore``
package without an install step.
"""

from __future__ import annotations

import os
import sys

SRC = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, "src"))
if SRC not in sys.path:
    sys.path.insert(0, SRC)
