from setuptools import setup

setup(
    name='apns-payload',
    version='0.0.1',
    python_requires='>=3.6.1',
    install_requires=[],
    extras_require={'test': ['pytest']},
    packages=['apns_payload'],
    url='https://github.com/etataurov/apns-payload',
    license='MIT',
    author='etataurov',
    author_email='tatauroff@gmail.com',
    description='Apple Push Notification Service payload builder'
)
