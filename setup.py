from setuptools import setup, find_packages

setup(
    name="dashboard_layout",
    version="0.1.0",
    packages=find_packages(),
    py_modules=["main"],
    package_data={"desktop_ui": ["qml/*.qml"]},
    install_requires=[
        "PySide6>=6.5",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.10",
)
