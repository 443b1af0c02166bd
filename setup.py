from setuptools import setup, find_packages

# Read long description from README
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="lingopause",
    version="0.1.0",
    author="LingoPause Contributors",
    description="Listen-and-repeat language practice for YouTube videos",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/lingopause/lingopause",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Multimedia :: Video",
    ],
    python_requires=">=3.8",
    install_requires=[
        "requests>=2.28.0",
        "yt-dlp>=2023.0.0",
        "faster-whisper>=1.0.0",
        "flask>=2.2.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "lingopause=lingopause.cli:main",
        ],
    },
    include_package_data=True,
    keywords="youtube language-learning translation pronunciation levenshtein transcript",
    project_urls={
        "Bug Reports": "https://github.com/lingopause/lingopause/issues",
        "Source": "https://github.com/lingopause/lingopause",
    },
)
