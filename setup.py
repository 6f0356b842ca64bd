from setuptools import find_packages, setup

package_name = 'shape_similarity'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test', 'test.*']),
    package_data={
        package_name: ['config/*.yaml'],
    },
    python_requires='>=3.11',
    install_requires=[
        'setuptools',
        'pyyaml',
        'nudged',
    ],
    zip_safe=True,
    maintainer='hansoo',
    maintainer_email='hansoo@todo.todo',
    description=(
        'Translation, scale and rotation invariant similarity '
        'of planar curves'
    ),
    license='Apache-2.0',
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'shape_similarity = shape_similarity.presentation.main:main',
        ],
    },
)
