"""
Modules package initialization.
This package contains all the functional modules of the application.
"""

from blogapi.modules import users
from blogapi.modules import posts
from blogapi.modules import quotes
