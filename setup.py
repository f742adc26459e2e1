import setuptools

with open('requirements.txt') as f:
    install_requires = f.read().strip().split('\n')


setuptools.setup(name="ripsflow",
                 version="0.1.dev",
                 author="Rena Elkin",
                 description="Toolbox to build filtered Vietoris-Rips complexes stored in simplex trees",
                 install_requires=install_requires,
                 extras_require={'test': ['pytest']},
                 packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
)
