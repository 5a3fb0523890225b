import codecs
import os.path
import re

from setuptools import setup, find_packages

# We want the value of ``porterstem.__version__``. However, we cannot
# simply ``import porterstem`` since porterstem requires pyparsing which
# might not be installed. Hence we extract the version information
# "manually".
module_dir = os.path.dirname(__file__)
init_filename = os.path.join(module_dir, 'porterstem', '__init__.py')
with codecs.open(init_filename, 'r', 'utf8') as f:
    for line in f:
        m = re.match(r'\s*__version__\s*=\s*[\'"](.*)[\'"]\s*', line)
        if m:
            version = m.group(1)
            break
    else:
        raise Exception('Could not find version number.')

setup(
    name='porterstem',
    version=version,
    description='The Porter stemming algorithm for English words',
    url='https://github.com/torfuspolymorphus/porterstem',
    author='Florian Brucker',
    author_email='mail@florianbrucker.de',
    license='MIT',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'Topic :: Text Processing :: Linguistic',
        'Topic :: Text Processing :: Indexing',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    keywords='porter stemmer stemming',
    packages=find_packages(exclude=['test']),
    python_requires='>=3.7',
    install_requires=['pyparsing >= 3.0'],
    extras_require={'test': ['pytest']},
    platforms=['any'],
    entry_points={'console_scripts':['porterstem=porterstem.__main__:main']},
)
