from setuptools import find_packages, setup

setup(
    name="utility-programming",
    version="0.1.0-alpha",
    description="Utility Programming - composable utility optimization",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=["numpy", "matplotlib", "tabulate", "tqdm"],
    extras_require={"test": ["pytest"]},
)
