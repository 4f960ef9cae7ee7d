"""
pish – a small line-oriented command interpreter.
Features:
 - Builtins: cd, exit, history
 - External commands via fork/exec (psutil.Popen)
 - Interactive mode with prompt and history, or batch mode from a file
"""

__version__ = "0.1.0"
