"""
Interactive calculator with debug logging on stderr
"""
from fractioncalc import Config, run

if __name__ == "__main__":
    run(config=Config(log_level="DEBUG"))
