import os

VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"


ARGV0 = "flagkit"
DESCRIPTION = "A small declarative parser for flat key/value command-line flags"
EXTRA_ARGS_ENV = "FLAGKIT_EXTRA_ARGS"
GLOBAL_DIR = os.path.join(os.path.expanduser("~"), ".flagkit")
GLOBAL_LOG_FILE: str = os.path.join(GLOBAL_DIR, "flagkit.log")

TRUE_LITERAL = "true"
FALSE_LITERAL = "false"
HELP_KEYS = ("-h", "--help")

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1
F32_MAX = 3.4028234663852886e38
F32_MIN_NORMAL = 1.1754943508222875e-38

NO_COLOR_ENV = "NO_COLOR"
HELP_WIDTH = 60
