"""
Golden Zone Analyzer

Fibonacci retracement analysis and Golden Zone (61.8%) backtesting for daily
price histories.
"""
from goldenzone.strategy import *  # noqa: F401,F403
from goldenzone.strategy import __all__

__version__ = "0.1.0"
