"""Find every route between two cities using a caller-defined point type."""

from dataclasses import dataclass

from netpaths import Net, NodeBuilder, NoPathFoundError, format_paths


@dataclass(frozen=True)
class City:
    code: str
    name: str

    def identifier(self) -> str:
        return self.code


def main() -> None:
    ams = City("AMS", "Amsterdam")
    ber = City("BER", "Berlin")
    par = City("PAR", "Paris")
    vie = City("VIE", "Vienna")
    lis = City("LIS", "Lisbon")

    net = Net(
        [
            NodeBuilder().point(ams).connected_points([ber, par]).build(),
            NodeBuilder().point(ber).connected_points([ams, par, vie]).build(),
            NodeBuilder().point(par).connected_points([ams, ber, vie]).build(),
            NodeBuilder().point(vie).connected_points([ber, par]).build(),
            NodeBuilder().point(lis).build(),
        ]
    )

    print(format_paths(net.find_paths(ams, vie), separator="\n", path_separator=" -> "))

    try:
        net.find_paths(ams, lis)
    except NoPathFoundError as exc:
        print(f"{ams.name} to {lis.name}: {exc}")


if __name__ == "__main__":
    main()
