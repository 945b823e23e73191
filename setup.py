import ast

from setuptools import setup

# Read the package docstring without importing the package, its dependencies may not be installed yet.
with open('src/sunpos/__init__.py', encoding='utf-8') as f:
    docstring = ast.get_docstring(ast.parse(f.read()))

description, long_description = docstring.split('\n', 1)

setup(
    name='sunpos',
    version='0.1.0',
    author="Quinton Barnes",
    author_email="devqbizzle68@gmail.com",
    description=description,
    long_description=long_description,
    long_description_content_type='text/plain',
    license='MIT',
    install_requires=['pyevspace>=0.14.0,<0.15'],
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: Astronomy'
    ],
    packages=['sunpos', 'sunpos.core', 'sunpos.util', 'sunpos.bodies'],
    package_dir={'': 'src'},
)
