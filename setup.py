import setuptools

from htmluna.get_version import git_revision, version

try:
    long_desc = open("README.md").read()
except IOError:
    long_desc = "Failed to read README.md"

with open("htmluna/version.py", "w") as version_file:
    version_file.write(f"""# Generated in setup.py

git_revision = {git_revision!r}
version = {version!r}
""")

setuptools.setup(
    name="htmluna",
    version=version,
    author="htmluna contributors",

    description="An HTML to Luna converter.",
    long_description=long_desc,
    long_description_content_type="text/markdown",

    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),

    install_requires=[
        "mautrix>=0.20,<0.22",
        "ruamel.yaml>=0.17,<0.19",
        "attrs>=22",
    ],
    extras_require={
        "test": ["pytest", "pytest-mock"],
    },
    python_requires="~=3.10",

    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: GNU Affero General Public License v3 or later (AGPLv3+)",
        "Topic :: Text Processing :: Markup :: HTML",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
    ],
    entry_points="""
        [console_scripts]
        htmluna=htmluna.__main__:main
    """,
    package_data={"htmluna": ["example-config.yaml"]},
)
