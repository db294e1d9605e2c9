from setuptools import setup

setup(
    name             = 'genome_io',
    version          = '1.0.0',
    description      = (
        'Fail-fast FASTA scaffold and GFF annotation parsers producing '
        'typed, immutable records.'
    ),
    long_description = open('README.md').read(),
    long_description_content_type = 'text/markdown',
    license          = 'MIT',
    python_requires  = '>=3.7',
    packages         = ['genome_io'],
    install_requires = [],   # standard library only
    extras_require   = {
        'dev': ['pytest>=7.0'],
    },
    classifiers = [
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Bio-Informatics',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    keywords = (
        'bioinformatics FASTA GFF scaffold annotation exon CDS codon parser'
    ),
)
