"""
libbase64 setup script
"""
#=============================================================================
# init script env -- ensure cwd = root of source dir
#=============================================================================
import os
root_dir = os.path.abspath(os.path.join(__file__, ".."))
os.chdir(root_dir)

#=============================================================================
# imports
#=============================================================================
import re
from setuptools import setup, find_packages

#=============================================================================
# version string
#=============================================================================

# pull version string from libbase64 without importing it
# (build env may not have typing_extensions installed yet)
with open(os.path.join(root_dir, "libbase64", "__init__.py")) as fh:
    version = re.search(r'^__version__ = "([^"]+)"', fh.read(), re.M).group(1)

#=============================================================================
# static text
#=============================================================================
SUMMARY = "configurable base64 codec with custom alphabets and padding"

DESCRIPTION = """\
libbase64 encodes and decodes base64 using any 64 character printable-ascii
alphabet, with an optional padding character. Besides the usual bytes <-> text
conversions it supports decoding concatenated, independently padded base64
segments, and positional base-64 encoding of (arbitrarily large) integers.
"""

KEYWORDS = """\
base64 base64url encoding decoding alphabet padding
"""

CLASSIFIERS = """\
Intended Audience :: Developers
License :: OSI Approved :: BSD License
Natural Language :: English
Operating System :: OS Independent
Programming Language :: Python :: 3
Programming Language :: Python :: Implementation :: CPython
Programming Language :: Python :: Implementation :: PyPy
Topic :: Software Development :: Libraries
""".splitlines()

if '.dev' in version:
    CLASSIFIERS.append("Development Status :: 3 - Alpha")
else:
    CLASSIFIERS.append("Development Status :: 5 - Production/Stable")

#=============================================================================
# run setup
#=============================================================================
setup(
    # package info
    packages=find_packages(root_dir, include=["libbase64", "libbase64.*"]),
    zip_safe=True,
    python_requires=">=3.9",

    # metadata
    name="libbase64",
    version=version,
    license="BSD",

    description=SUMMARY,
    long_description=DESCRIPTION,
    keywords=KEYWORDS,
    classifiers=CLASSIFIERS,

    install_requires=[
        "typing_extensions>=4.6",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-archon",
        ],
    },
)

#=============================================================================
# eof
#=============================================================================
