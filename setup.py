# setup.py
from setuptools import setup, find_packages

setup(
    name="scheduled_sending",
    version="0.1.0",
    description="DocuSign Scheduled Sending Service",
    packages=find_packages(where=".", exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "fastapi",
        "pydantic>=2",
        "email-validator",
        "docusign-esign>=3.20",
        "python-dotenv",
        "uvicorn",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
)
