from smg.autodiff import DualNumber


def main():
    # Seed the variable with respect to which we're differentiating, at x = 1.
    u: DualNumber = DualNumber(1.0, 1.0)

    # sin(1), and sin'(x) = cos(x), so we expect cos(1).
    v: DualNumber = u.sin()
    print("v: {}, dv: {}".format(v.x, v.dx))

    # sin(sin(1)), and by the chain rule we expect cos(sin(1)) * cos(1).
    w: DualNumber = v.sin()
    print("w: {}, dw: {}".format(w.x, w.dx))

    # sigmoid(1), and sigmoid'(x) = sigmoid(x) * (1 - sigmoid(x)).
    z: DualNumber = u.sigmoid()
    print("z: {}, dz: {}".format(z.x, z.dx))


if __name__ == "__main__":
    main()
