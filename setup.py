from setuptools import setup, find_packages


setup(name='astrokit',
      version='1.0.0',
      description='Vector algebra and rotation primitives for astrodynamics',
      packages=find_packages(include=['astrokit', 'astrokit.*']),
      python_requires='>=3.10',
      install_requires=['numpy'],
      extras_require={'test': ['pytest']},
      entry_points={'console_scripts': ['astrokit-vector-test=astrokit.scripts.vector_test:main']})
