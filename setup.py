import setuptools

with open('requirements.txt') as f:
    install_requires = f.read().strip().split('\n')


setuptools.setup(name="branchflow",
                 version="0.1.0",
                 author="The branchflow developers",
                 description="Lineage assignment of cells from trajectory weights and the graph of how lineage assignments branch",
                 install_requires=install_requires,
                 extras_require={'test': ['pytest']},
                 packages=setuptools.find_packages(exclude=['tests', 'tests.*', 'docs']),
                 python_requires='>=3.8',
)
