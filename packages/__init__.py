# tradestats packages
"""
Package structure:
- tradestats: statistics, Risk of Ruin and OHLC pattern analysis
"""
