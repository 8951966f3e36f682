#!/usr/bin/env python

# Author: cipherlite developers
# See the LICENSE file for legal information regarding use of this file.

from setuptools import setup



setup(name="cipherlite",
      version="0.1.0",
      author="cipherlite developers",
      description="Compiler of OpenSSL style cipher rule strings into TLS "
                  "cipher suite preference lists.",
      license="LGPLv2",
      scripts=["scripts/cipherlist.py"],
      packages=["cipherlite", "cipherlite.utils"],
      install_requires=['ecdsa>=0.13'],
      classifiers=[
            'Development Status :: 3 - Alpha',
            'Intended Audience :: Developers',
            'License :: OSI Approved :: GNU Lesser General Public License v2 (LGPLv2)',
            'Operating System :: OS Independent',
            'Programming Language :: Python',
            'Programming Language :: Python :: 3',
            'Topic :: Security :: Cryptography',
            'Topic :: Software Development :: Libraries :: Python Modules',
            'Topic :: System :: Networking'
          ],
      keywords="ssl, tls, cipher suites, openssl cipher string"
      )
