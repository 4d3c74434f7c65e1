from setuptools import setup, find_packages


def read_reqs(filename):
    with open(filename) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and not line.startswith("-"):
                yield line


req_dev_packages = list(read_reqs("reqs/dev-requirements.in"))
req_packages = list(read_reqs("reqs/requirements.in"))

classifiers = [ 'Development Status :: 4 - Beta'
              , 'Intended Audience :: Developers'
              , 'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)'
              , 'Natural Language :: English'
              , 'Operating System :: OS Independent'
              , 'Programming Language :: Python :: 3.8'
              , 'Programming Language :: Python :: Implementation :: CPython'
              , 'Topic :: Software Development :: Libraries :: Python Modules'
              , 'Topic :: Text Processing'
              ]

setup( classifiers = classifiers
     , description = 'Reader and writer for the S configuration format'
     , name = 'sconf'
     , packages = find_packages(exclude=['tests'])
     # there must be nothing on the following line after the = other than a string constant
     , version = '0.1.0'
     , install_requires = req_packages
     , python_requires = '>=3.8'
     , zip_safe = False
     , extras_require = { 'dev': req_dev_packages }
      )
