"""
Setup script for rps-duel package with optional Cython compilation.

This builds the internal modules (_*.py) as compiled extensions when
Cython is installed, while keeping the public API (controller.py,
types.py, labels.py, errors.py, cli.py) as readable Python source.
"""

from setuptools import setup, find_packages, Extension
import os

# Check if Cython is available
try:
    from Cython.Build import cythonize
    USE_CYTHON = True
except ImportError:
    USE_CYTHON = False
    print("Cython not found. Building without compilation (source only).")

# Internal modules to compile with Cython
CYTHON_MODULES = [
    "src/rps_duel/_config.py",
    "src/rps_duel/_round/rules.py",
    "src/rps_duel/_round/state.py",
    "src/rps_duel/_shared/logging_config.py",
]


def get_extensions():
    """Build Extension objects for Cython compilation."""
    if not USE_CYTHON:
        return []

    extensions = []
    for module_path in CYTHON_MODULES:
        if os.path.exists(module_path):
            # Convert path to module name: src/rps_duel/_foo.py -> rps_duel._foo
            module_name = module_path.replace("src/", "").replace("/", ".").replace(".py", "")
            extensions.append(
                Extension(
                    name=module_name,
                    sources=[module_path],
                )
            )
    return extensions


def get_ext_modules():
    """Get extension modules, cythonized if Cython is available."""
    extensions = get_extensions()
    if not extensions:
        return []

    return cythonize(
        extensions,
        compiler_directives={
            "language_level": "3",
        },
        nthreads=os.cpu_count() or 1,
    )


# Only add ext_modules if we have Cython
ext_modules = get_ext_modules() if USE_CYTHON else []

setup(
    name="rps-duel",
    version="1.0.0",
    description="Two-player Rock-Paper-Scissors: turn-gated round state and a hot-seat CLI",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    ext_modules=ext_modules,
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "cython>=3.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "rps-duel=rps_duel.cli:main",
        ],
    },
    # Include compiled .so/.pyd files in the package
    package_data={
        "rps_duel": ["*.so", "*.pyd", "_round/*.so", "_round/*.pyd", "_shared/*.so", "_shared/*.pyd"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Games/Entertainment",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Cython",
    ],
)
