from setuptools import setup, find_packages

with open('README.md') as f:
    readme = f.read()

if __name__ == "__main__":
    try:
        setup(
            name='multi-stopwatch',
            version='0.1',
            description='Accumulating stopwatch with total and average elapsed times',
            long_description=readme,
            long_description_content_type='text/markdown',
            packages=find_packages(where='src'),
            package_dir={'': 'src'},
            python_requires='>=3.8',
            install_requires=['numpy'],
            extras_require={'test': ['pytest']},
            classifiers=[
                'Programming Language :: Python :: 3.8',
            ],
        )
    except Exception:
        print("\n\nAn error occurred while building the project, "
              "please ensure you have all necessary dependencies installed")
        raise
