import setuptools

setuptools.setup(
    name="gwent_companion",
    version="0.3",
    author="yochi",
    author_email="pedrogush@gmail.com",
    description="Gwent Companion: deck builder, saved-deck library and in-match card tracker",
    packages=[
        "controllers",
        "repositories",
        "services",
        "utils",
        "widgets",
        "widgets.dialogs",
        "widgets.handlers",
        "widgets.panels",
    ],
    py_modules=["main"],
    package_data={"repositories": ["data/*.json"]},
    classifiers=["Programming Language :: Python :: 3", "Operating System :: OS Independent"],
    python_requires=">=3.11",
    install_requires=[
        "loguru",
        "wxPython",  # Desktop UI
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "gui_scripts": ["gwent-companion = main:main"],
    },
)
