from setuptools import setup, find_packages

setup(
    name="word2ipa",
    version="0.1.0",
    description="Word to IPA - Look up IPA transcriptions and browse the IPA symbol table",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    author="mohfy, Xander",
    url="https://github.com/mohfy/word2ipa",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        "word2ipa": ["data/dicts/*.json"],
    },
    install_requires=[
        "PyYAML>=6.0",
        "PyQt6>=6.0; python_version>='3.9'",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "word2ipa=word2ipa.cli:main",
            "word2ipa-gui=word2ipa.main_gui:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Topic :: Text Processing :: Linguistic",
    ],
    python_requires=">=3.9",
)
