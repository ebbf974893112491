from setuptools import setup


def readme():
    with open('README.md') as f:
        return f.read()

setup(
    name='rational',
    version='0.1.0',
    description='Exact fractions with normalized storage and selectable equality',
    long_description=readme(),
    long_description_content_type='text/markdown',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Topic :: Education',
        'Topic :: Scientific/Engineering :: Mathematics',
    ],
    keywords='fraction rational arithmetic gcd',
    license='MIT',
    python_requires='>=3.8',
    packages=['rational'],
    scripts=[
        'bin/rational-calc',
        'bin/rational-serve',
    ],
    install_requires=[
        'astor',
        'plac',
        'epc'
    ],
    extras_require={
        'test': ['pytest'],
    },
    include_package_data=True,
    zip_safe=False,
)
