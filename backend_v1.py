from version_backend import serve


def main():
    serve("v1")


if __name__ == "__main__":
    main()
