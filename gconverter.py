import graphio

def convert(infile_name: str, outfile_name: str, from_fmt: str='dimacs', to_fmt: str='bin') -> None:
    graphio.save_graph(graphio.load_graph(infile_name, from_fmt), outfile_name, to_fmt)

if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(prog='gconverter',
                                     description='Convert between graph formats')
    parser.add_argument('-i', '--infile', required=True)
    parser.add_argument('-o', '--outfile', required=True)
    parser.add_argument('--from', dest='from_fmt', default='dimacs', choices=graphio.FORMATS)
    parser.add_argument('--to', dest='to_fmt', default='bin', choices=graphio.FORMATS)

    args = parser.parse_args()

    try:
        convert(args.infile, args.outfile, args.from_fmt, args.to_fmt)
    except (OSError, ValueError) as e:
        parser.exit(1, f'Error: {e}\n')
