from version_backend import serve


def main():
    serve("v2")


if __name__ == "__main__":
    main()
