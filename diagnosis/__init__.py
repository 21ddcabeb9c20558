"""
Dance class diagnosis: quiz answers -> result, recommended class and instructors.
"""
