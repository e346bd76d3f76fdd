from setuptools import setup, find_packages
from pathlib import Path

with Path('README.md').open() as readme:
    readme = readme.read()

version = "0.1"

setup(
    name='stack-safe',
    version=version if isinstance(version, str) else str(version),
    keywords="Python, recursion, trampoline, generator, stack safety, continuation",
    description="Run recursive functions on a heap-allocated stack via generators",
    long_description=readme,
    long_description_content_type="text/markdown",
    license='mit',
    python_requires='>=3.6.0',
    packages=find_packages(exclude=['test', 'runtests']),
    entry_points={"console_scripts": ["stack-safe-ackermann=stack_safe.__main__:main"]},
    install_requires=['attrs'],
    extras_require={'test': ['pytest']},
    platforms="any",
    classifiers=[
        "Programming Language :: Python :: 3.6",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: Implementation :: CPython",
    ],
    zip_safe=False,
)
