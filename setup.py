from pathlib import Path
from setuptools import find_packages, setup

README = Path(__file__).parent / "README.md"


setup(
    name="prcampaign",
    version="0.1.0",
    description="Bulk pull-request actions across the repositories of a campaign",
    long_description=README.read_text(encoding="utf-8") if README.exists() else "",
    long_description_content_type="text/markdown",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=["rich"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["prcampaign = prcampaign.cli:main"]},
)
