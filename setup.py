import codecs
import os.path
import re

from setuptools import setup, find_packages

# We want the value of ``snowballword.__version__`` without importing the
# package, hence we extract the version information "manually".
module_dir = os.path.dirname(__file__)
init_filename = os.path.join(module_dir, 'snowballword', '__init__.py')
with codecs.open(init_filename, 'r', 'utf8') as f:
    for line in f:
        m = re.match(r'\s*__version__\s*=\s*[\'"](.*)[\'"]\s*', line)
        if m:
            version = m.group(1)
            break
    else:
        raise Exception('Could not find version number.')

setup(
    name='snowballword',
    version=version,
    description='Mutable words with R1/R2 regions for Snowball stemmers',
    url='https://github.com/torfuspolymorphus/snowballword',
    author='Florian Brucker',
    author_email='mail@florianbrucker.de',
    license='MIT',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Text Processing :: Linguistic',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent ',
    ],
    keywords='snowball stemming',
    packages=find_packages(exclude=['test']),
    install_requires=[],
    extras_require={'test': ['pytest']},
    platforms=['any'],
)
